"""
Viewport gate port definitions.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from .models import GateOptions, IntersectionEntry

IntersectionCallback = Callable[[IntersectionEntry], None]


class VisibilityObserverPort(Protocol):
    """Watches one element for viewport intersection."""

    def start(self, callback: IntersectionCallback) -> None:
        """Begin delivering intersection signals to callback."""
        ...

    def stop(self) -> None:
        """Stop delivering signals. Safe to call more than once."""
        ...


ObserverFactory = Callable[[GateOptions], VisibilityObserverPort]
