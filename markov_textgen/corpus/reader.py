# markov_textgen/corpus/reader.py - load a corpus file as one contiguous string

import logging
from pathlib import Path
from typing import Union

from markov_textgen.corpus.normalizer import normalize_corpus
from markov_textgen.errors import CorpusError

logger = logging.getLogger(__name__)


def read_corpus(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read the whole file at `path` and return it with line endings normalized.
    Raises CorpusError if the file is missing or cannot be decoded.
    """
    p = Path(path)
    try:
        # newline="" keeps "\r" so normalize_corpus is the one place that strips it
        with open(p, "r", encoding=encoding, newline="") as f:
            text = f.read()
    except FileNotFoundError as e:
        raise CorpusError(f"corpus not found: {p}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusError(f"could not read corpus {p}: {e}") from e

    logger.debug("read %d chars from %s", len(text), p)
    return normalize_corpus(text)
