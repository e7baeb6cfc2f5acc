"""
Geometric viewport adapter (VisibilityObserverPort implementation).

Server-side stand-in for a browser intersection observer. Elements are laid
out as rectangles in page coordinates; the viewport is a rectangle that
moves with scroll_to(). Observers receive an IntersectionEntry on start and
whenever their element crosses the configured threshold.

Semantics follow the browser facility:
- The root (viewport) is grown by the root margin before intersecting
- Percent margins resolve against viewport height (top/bottom) and width
  (left/right)
- intersection_ratio is the visible share of the element's own area
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.components.viewport import (
    GateOptions,
    IntersectionCallback,
    IntersectionEntry,
    ObserverFactory,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in page coordinates."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def intersect(self, other: Rect) -> Rect | None:
        """Overlap of two rectangles; edge contact yields a zero-area rect."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right < left or bottom < top:
            return None
        return Rect(left, top, right - left, bottom - top)


class GeometricObserver:
    """Observer for one element within a ViewportGeometry."""

    def __init__(self, geometry: ViewportGeometry, element_id: str, options: GateOptions) -> None:
        self._geometry = geometry
        self._element_id = element_id
        self._options = options
        self._callback: IntersectionCallback | None = None
        self._last: bool | None = None
        self.start_count = 0
        self.stop_count = 0

    @property
    def active(self) -> bool:
        return self._callback is not None

    @property
    def options(self) -> GateOptions:
        return self._options

    def start(self, callback: IntersectionCallback) -> None:
        if self._callback is not None:
            raise RuntimeError(f"Observer for {self._element_id!r} already started")
        self.start_count += 1
        self._callback = callback
        self._geometry._attach(self)
        self.evaluate()

    def stop(self) -> None:
        if self._callback is None:
            return
        self.stop_count += 1
        self._callback = None
        self._geometry._detach(self)

    def evaluate(self) -> None:
        """Deliver a signal if the threshold state changed since the last one."""
        if self._callback is None:
            return

        entry = self._geometry.measure(self._element_id, self._options)
        if entry.is_intersecting == self._last:
            return
        self._last = entry.is_intersecting
        self._callback(entry)


class ViewportGeometry:
    """
    A scrollable viewport over a page of registered elements.

    Usage:
        geometry = ViewportGeometry(width=1280, height=800)
        geometry.register("comments", Rect(0, 2400, 1280, 600))
        gate = ViewportGate(render, geometry.observer_factory("comments"))
        gate.mount()
        geometry.scroll_to(1700)
    """

    def __init__(self, width: float, height: float, scroll_y: float = 0.0) -> None:
        self._width = width
        self._height = height
        self._scroll_y = scroll_y
        self._elements: dict[str, Rect] = {}
        self._observers: list[GeometricObserver] = []

    # --- Layout ---

    def register(self, element_id: str, rect: Rect) -> None:
        self._elements[element_id] = rect
        self._dispatch()

    def scroll_to(self, y: float) -> None:
        self._scroll_y = y
        self._dispatch()

    def resize(self, width: float, height: float) -> None:
        self._width = width
        self._height = height
        self._dispatch()

    @property
    def viewport(self) -> Rect:
        return Rect(0.0, self._scroll_y, self._width, self._height)

    @property
    def active_observers(self) -> int:
        return len(self._observers)

    # --- Observation ---

    def observer_factory(self, element_id: str) -> ObserverFactory:
        """Factory that hands a ViewportGate observers for one element."""

        def factory(options: GateOptions) -> GeometricObserver:
            return GeometricObserver(self, element_id, options)

        return factory

    def measure(self, element_id: str, options: GateOptions) -> IntersectionEntry:
        """Intersection of an element with the margin-extended viewport."""
        rect = self._elements.get(element_id)
        if rect is None:
            return IntersectionEntry(is_intersecting=False, target=element_id)

        margin = options.margin
        view = self.viewport
        top = margin.top.resolve(view.height)
        right = margin.right.resolve(view.width)
        bottom = margin.bottom.resolve(view.height)
        left = margin.left.resolve(view.width)
        root = Rect(
            view.x - left,
            view.y - top,
            view.width + left + right,
            view.height + top + bottom,
        )

        overlap = rect.intersect(root)
        if overlap is None:
            return IntersectionEntry(is_intersecting=False, target=element_id)

        if rect.area > 0:
            ratio = overlap.area / rect.area
        else:
            ratio = 1.0

        # threshold 0 means any contact, including a shared edge
        if options.threshold == 0:
            visible = True
        else:
            visible = ratio >= options.threshold
        return IntersectionEntry(is_intersecting=visible, intersection_ratio=ratio, target=element_id)

    def _attach(self, observer: GeometricObserver) -> None:
        self._observers.append(observer)

    def _detach(self, observer: GeometricObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _dispatch(self) -> None:
        # Callbacks may stop observers, so iterate a snapshot.
        for observer in list(self._observers):
            observer.evaluate()
        logger.debug("Dispatched viewport update at scroll_y=%s", self._scroll_y)
