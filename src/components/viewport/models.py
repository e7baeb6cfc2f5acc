"""
Viewport gate models.

Root margins follow CSS ``rootMargin`` syntax: one to four lengths in
``px`` or ``%`` (bare ``0`` allowed), ordered top, right, bottom, left.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

MarginUnit = Literal["px", "%"]

_LENGTH = re.compile(r"(-?\d+(?:\.\d+)?)(px|%)?")


class GateState(str, Enum):
    """Lifecycle of a mounted gate. PENDING -> TRIGGERED only."""

    PENDING = "pending"
    TRIGGERED = "triggered"


@dataclass(frozen=True)
class Length:
    value: float
    unit: MarginUnit = "px"

    def resolve(self, reference: float) -> float:
        """Pixels, with percentages taken of `reference`."""
        if self.unit == "%":
            return reference * self.value / 100.0
        return self.value


@dataclass(frozen=True)
class Margin:
    """Resolved root margin, clockwise from top."""

    top: Length
    right: Length
    bottom: Length
    left: Length


def parse_root_margin(margin: str) -> Margin:
    """
    Parse a CSS-style root margin.

    Raises:
        ValueError: if the margin is empty or a length is malformed.
    """
    parts = margin.split()
    if not 1 <= len(parts) <= 4:
        raise ValueError(f"Root margin must have 1-4 lengths: {margin!r}")

    lengths: list[Length] = []
    for part in parts:
        match = _LENGTH.fullmatch(part)
        if match is None:
            raise ValueError(f"Invalid root margin length {part!r} in {margin!r}")
        value = float(match.group(1))
        unit = match.group(2)
        if unit is None and value != 0:
            raise ValueError(f"Root margin length needs a px or % unit: {part!r}")
        lengths.append(Length(value, unit or "px"))

    # CSS shorthand expansion
    if len(lengths) == 1:
        top = right = bottom = left = lengths[0]
    elif len(lengths) == 2:
        top, right = lengths
        bottom, left = top, right
    elif len(lengths) == 3:
        top, right, bottom = lengths
        left = right
    else:
        top, right, bottom, left = lengths

    return Margin(top=top, right=right, bottom=bottom, left=left)


@dataclass(frozen=True)
class GateOptions:
    """
    Viewport gate configuration.

    root_margin extends the detection region beyond the viewport so content
    starts rendering just before it scrolls in. threshold is the visible
    fraction of the element required to trigger.
    """

    root_margin: str = "50px"
    threshold: float = 0.1
    fallback: str | None = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(f"threshold must be within 0.0-1.0, got {self.threshold}")
        parse_root_margin(self.root_margin)

    @property
    def margin(self) -> Margin:
        return parse_root_margin(self.root_margin)

    def observation_key(self) -> tuple[str, float]:
        """Parameters whose change requires a new observation."""
        return (self.root_margin, self.threshold)


DEFAULT_GATE_OPTIONS = GateOptions()


@dataclass(frozen=True)
class IntersectionEntry:
    """One visibility signal delivered by an observer."""

    is_intersecting: bool
    intersection_ratio: float = 0.0
    target: Any = None
