"""
Viewport component - Deferred rendering gated on first visibility.

The gate takes any VisibilityObserverPort factory; src.adapters.viewport
provides a geometric one (ViewportGeometry.observer_factory) for
server-side and test use.
"""

from ._impl import DEFAULT_PLACEHOLDER, ViewportGate
from .models import (
    DEFAULT_GATE_OPTIONS,
    GateOptions,
    GateState,
    IntersectionEntry,
    Length,
    Margin,
    parse_root_margin,
)
from .ports import IntersectionCallback, ObserverFactory, VisibilityObserverPort

__all__ = [
    # Gate
    "DEFAULT_PLACEHOLDER",
    "ViewportGate",
    # Models
    "DEFAULT_GATE_OPTIONS",
    "GateOptions",
    "GateState",
    "IntersectionEntry",
    "Length",
    "Margin",
    "parse_root_margin",
    # Ports
    "IntersectionCallback",
    "ObserverFactory",
    "VisibilityObserverPort",
]
