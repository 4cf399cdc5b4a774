"""
markov_textgen.core

The modeling pipeline:
 - ContextTable: window -> ordered next-character frequencies and probabilities
 - Generator: training scan and weighted sampling over a sliding window
 - RandomSource: the one capability the sampler needs from an RNG
"""

from .context_table import CharFrequency, ContextTable
from .generator import Generator, PLACEHOLDER_CHAR
from .protocols import RandomSource

__all__ = [
    "CharFrequency",
    "ContextTable",
    "Generator",
    "PLACEHOLDER_CHAR",
    "RandomSource",
]
