# markov_textgen/core/protocols.py
"""
Protocol interfaces for the pluggable pieces of the generator.

The Generator depends on this Protocol rather than on `random.Random` directly so
tests can inject a scripted source and production code can hand in any RNG.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Anything that produces the next uniform float in [0.0, 1.0)."""

    def random(self) -> float:
        ...
