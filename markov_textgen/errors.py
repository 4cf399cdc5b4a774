# markov_textgen/errors.py - exception types raised outside the core model


class MarkovTextgenError(Exception):
    """Base class for errors raised by markov_textgen's I/O and config layers."""


class CorpusError(MarkovTextgenError):
    """Corpus file could not be found or read."""


class ConfigError(MarkovTextgenError):
    """Config file exists but could not be parsed."""
