"""
Random source adapters (RandomPort implementations).

SystemRandomSource draws from a private random.Random seeded by the OS;
SeededRandom is the deterministic counterpart used in tests and fixtures.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


class SystemRandomSource:
    """Process randomness, isolated from the global `random` module state."""

    def __init__(self) -> None:
        self._rng = random.Random()

    def choice(self, seq: Sequence[T]) -> T:
        return self._rng.choice(seq)

    def randbelow(self, n: int) -> int:
        return self._rng.randrange(n)


class SeededRandom(SystemRandomSource):
    """
    Deterministic random source.

    Two instances created with the same seed yield the same sequence.
    """

    def __init__(self, seed: int | str = 0) -> None:
        self._rng = random.Random(seed)
        self.seed = seed


def create_random_source(seed: int | str | None = None) -> SystemRandomSource:
    """Factory: seeded when a seed is given, otherwise OS-seeded."""
    if seed is None:
        return SystemRandomSource()
    return SeededRandom(seed)
