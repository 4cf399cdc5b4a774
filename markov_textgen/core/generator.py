# markov_textgen/core/generator.py
"""
Generator - fixed-order character-level Markov text generator.

Training scans every window of `window_length` characters in the corpus and
records which character follows it. Generation starts from a seed text, looks up
its trailing window, samples the next character from the window's cumulative
distribution, appends it and slides the window forward.

Randomness comes from a single injected RandomSource:
 - Generator(3, seed=42) -> random.Random(42), reproducible output
 - Generator(3)          -> random.Random() seeded from OS entropy
 - Generator(3, rng=src) -> any object with random() -> float in [0, 1)
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
import logging
import random

from markov_textgen.core.context_table import CharFrequency, ContextTable
from markov_textgen.core.protocols import RandomSource

logger = logging.getLogger(__name__)

# returned by the sampler if a window somehow has no entries
PLACEHOLDER_CHAR = " "


class Generator:
    """
    Character-level Markov model: train() on a corpus, generate() from a seed.

    Calling train() more than once accumulates: counts from every corpus are
    merged and all probabilities are recomputed over the merged counts. Use
    reset() to start from an empty table instead.
    """

    def __init__(
        self,
        window_length: int,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        if window_length < 1:
            raise ValueError(f"window_length must be >= 1, got {window_length}")

        self.window_length = window_length
        self.seeded = rng is None and seed is not None
        self._rng: RandomSource = rng if rng is not None else random.Random(seed)
        self.table = ContextTable()

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def train(self, corpus_text: Optional[str]) -> None:
        """
        Record every (window, next char) observation in `corpus_text`, then
        finalize each window's distribution. Line terminators are expected to be
        normalized by the caller already (see markov_textgen.corpus).
        """
        if not corpus_text:
            logger.debug("train() called with empty corpus; nothing to do")
            return

        n = self.window_length
        for i in range(len(corpus_text) - n):
            self.table.record(corpus_text[i:i + n], corpus_text[i + n])

        self.table.finalize_all()
        logger.info(
            "trained on %d chars: %d windows, %d observations",
            len(corpus_text), len(self.table), self.table.total_observations(),
        )

    def reset(self) -> None:
        self.table.clear()

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------
    def _sample(self, entries: Optional[List[CharFrequency]]) -> str:
        """
        Pick a character by cumulative probability: first entry with cp > r.
        Falls back to the last entry when rounding leaves r above every cp.
        """
        if not entries:
            return PLACEHOLDER_CHAR

        r = self._rng.random()
        for entry in entries:
            if entry.cp is not None and r < entry.cp:
                return entry.char
        return entries[-1].char

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def generate(self, seed_text: Optional[str], target_length: int) -> str:
        """
        Extend `seed_text` by up to `target_length` sampled characters.

        Returns "" for a missing seed, the seed unchanged when it is shorter
        than the window, and stops early (without error) as soon as the
        current window was never seen in training.
        """
        if target_length < 0:
            raise ValueError(f"target_length must be >= 0, got {target_length}")
        if seed_text is None:
            return ""
        if len(seed_text) < self.window_length:
            return seed_text

        out = [seed_text]
        window = seed_text[-self.window_length:]
        produced = 0
        while produced < target_length:
            entries = self.table.lookup(window)
            if entries is None:
                logger.debug("window %r unseen; stopping after %d chars", window, produced)
                break
            nxt = self._sample(entries)
            out.append(nxt)
            window = window[1:] + nxt
            produced += 1

        return "".join(out)

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    def describe(self) -> str:
        """One line per window: `window : (c count p cp) (c count p cp) ...`"""
        lines = []
        for window, entries in self.table.items():
            lines.append(f"{window} : " + " ".join(str(e) for e in entries))
        return "".join(line + "\n" for line in lines)

    def stats(self) -> Dict[str, Any]:
        return {
            "window_length": self.window_length,
            "windows": len(self.table),
            "observations": self.table.total_observations(),
            "seeded": self.seeded,
        }

    def __str__(self) -> str:
        return self.describe()
