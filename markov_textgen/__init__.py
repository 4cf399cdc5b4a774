"""
markov_textgen - character-level Markov text generation.

    from markov_textgen import Generator, read_corpus

    gen = Generator(window_length=3, seed=42)
    gen.train(read_corpus("corpus.txt"))
    print(gen.generate("The", 200))
"""

from markov_textgen.core import CharFrequency, ContextTable, Generator, RandomSource
from markov_textgen.corpus import normalize_corpus, read_corpus
from markov_textgen.errors import ConfigError, CorpusError, MarkovTextgenError

__all__ = [
    "CharFrequency",
    "ContextTable",
    "Generator",
    "RandomSource",
    "normalize_corpus",
    "read_corpus",
    "MarkovTextgenError",
    "CorpusError",
    "ConfigError",
]

__version__ = "0.1.0"
