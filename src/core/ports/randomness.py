"""
Randomness Port.

Ambient randomness is injected rather than read from global process state,
so id generation and author selection can be made deterministic in tests.
Nothing drawn from this port is security sensitive.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomPort(Protocol):
    """Source of non-cryptographic randomness."""

    def choice(self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element of a non-empty sequence."""
        ...

    def randbelow(self, n: int) -> int:
        """Return a uniform integer in [0, n)."""
        ...
