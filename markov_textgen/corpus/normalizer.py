# markov_textgen/corpus/normalizer.py
from typing import Optional


def normalize_corpus(text: Optional[str]) -> Optional[str]:
    """Strip carriage returns so CRLF and LF corpora train the same windows."""
    if text is None:
        return None
    return text.replace("\r", "")
