from .normalizer import normalize_corpus
from .reader import read_corpus

__all__ = ["normalize_corpus", "read_corpus"]
