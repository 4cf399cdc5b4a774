# markov_textgen/core/context_table.py
"""
ContextTable - window -> next-character statistics

Each window (a fixed-length string) maps to an ordered list of CharFrequency
entries, one per distinct character seen right after that window. Entries keep
first-seen order; the cumulative probabilities and the sampler both rely on it.

Lifecycle:
 - record() while scanning the corpus (counts only grow)
 - finalize_probabilities() / finalize_all() once the counts are final
 - lookup() during generation (read-only)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

Window = str


@dataclass
class CharFrequency:
    """One possible next character for a window, with its count and derived mass."""
    char: str
    count: int = 0
    p: Optional[float] = None
    cp: Optional[float] = None

    def __str__(self) -> str:
        return f"({self.char} {self.count} {self.p} {self.cp})"


Entries = List[CharFrequency]


class ContextTable:
    """
    Owned mapping of Window -> ordered CharFrequency entries.

    Lookups for windows never seen in training return None; that is an expected
    outcome (short corpus, or generation wandered somewhere new), not an error.
    """

    def __init__(self) -> None:
        # dicts keep insertion order, so window enumeration is first-seen too
        self._table: Dict[Window, Entries] = {}

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def record(self, window: Window, next_char: str) -> None:
        """Count one occurrence of `next_char` following `window`."""
        if len(next_char) != 1:
            raise ValueError(f"next_char must be a single character, got {next_char!r}")

        entries = self._table.get(window)
        if entries is None:
            entries = []
            self._table[window] = entries

        for entry in entries:
            if entry.char == next_char:
                entry.count += 1
                return
        entries.append(CharFrequency(next_char, count=1))

    def finalize_probabilities(self, window: Window) -> None:
        """
        Set p = count / total and cp = running sum of p for the window's entries.
        Counts are left untouched. A window with zero total keeps p/cp unset.
        """
        entries = self._table.get(window)
        if entries is None:
            return

        total = sum(e.count for e in entries)
        if total == 0:
            logger.warning("window %r has no observations; distribution left unset", window)
            return

        cumulative = 0.0
        for entry in entries:
            entry.p = entry.count / total
            cumulative += entry.p
            entry.cp = cumulative

    def finalize_all(self) -> None:
        # windows are independent of each other, order does not matter
        for window in self._table:
            self.finalize_probabilities(window)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    def lookup(self, window: Window) -> Optional[Entries]:
        return self._table.get(window)

    def windows(self) -> List[Window]:
        return list(self._table)

    def items(self) -> Iterator[Tuple[Window, Entries]]:
        return iter(self._table.items())

    def total_observations(self) -> int:
        return sum(e.count for entries in self._table.values() for e in entries)

    def clear(self) -> None:
        self._table.clear()

    def __contains__(self, window: object) -> bool:
        return window in self._table

    def __len__(self) -> int:
        return len(self._table)
