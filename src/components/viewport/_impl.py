"""
ViewportGate - deferred rendering until first visibility.

Functional Core with a single piece of lifecycle state.

Invariants:
- PENDING -> TRIGGERED happens at most once per gate; it never reverts
- The observer is released as soon as the gate triggers, and again
  (idempotently) on unmount
- Signals delivered after unmount, or by an observer that has since been
  replaced, are ignored
- The child is rendered only after triggering, and at most once
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType

from .models import DEFAULT_GATE_OPTIONS, GateOptions, GateState, IntersectionEntry
from .ports import ObserverFactory, VisibilityObserverPort

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER = '<div class="h-32 bg-gray-100 animate-pulse rounded"></div>'


class ViewportGate:
    """
    Defers an expensive child until it scrolls near the viewport.

    Once triggered the child stays mounted; scrolling it back out of view
    has no effect.
    """

    def __init__(
        self,
        render_child: Callable[[], str],
        observer_factory: ObserverFactory,
        options: GateOptions = DEFAULT_GATE_OPTIONS,
    ) -> None:
        self._render_child = render_child
        self._observer_factory = observer_factory
        self._options = options
        self._state = GateState.PENDING
        self._observer: VisibilityObserverPort | None = None
        self._mounted = False
        self._detached = False
        self._child: str | None = None

    # --- Lifecycle ---

    def mount(self) -> None:
        """Start observing. Mounting an already mounted gate is a no-op."""
        if self._detached:
            raise RuntimeError("ViewportGate cannot be remounted after unmount")
        if self._mounted:
            return
        self._mounted = True
        self._subscribe()

    def unmount(self) -> None:
        """Release the observer, whatever the state. Idempotent."""
        self._detached = True
        self._release()

    def update_options(self, options: GateOptions) -> None:
        """
        Apply new options.

        A pending, mounted gate re-subscribes when the margin or threshold
        changed. Once triggered, only the stored options change.
        """
        changed = options.observation_key() != self._options.observation_key()
        self._options = options

        if not changed or self._state is GateState.TRIGGERED:
            return
        if not self._mounted or self._detached:
            return

        logger.debug("Re-subscribing viewport gate with %s", options.observation_key())
        self._release()
        self._subscribe()

    def __enter__(self) -> ViewportGate:
        self.mount()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unmount()

    # --- Observation ---

    def _subscribe(self) -> None:
        observer = self._observer_factory(self._options)
        self._observer = observer
        observer.start(lambda entry: self._on_signal(observer, entry))

    def _release(self) -> None:
        observer, self._observer = self._observer, None
        if observer is not None:
            observer.stop()

    def _on_signal(self, source: VisibilityObserverPort, entry: IntersectionEntry) -> None:
        if self._detached or source is not self._observer:
            return
        if self._state is GateState.TRIGGERED or not entry.is_intersecting:
            return

        self._state = GateState.TRIGGERED
        logger.debug("Viewport gate triggered (ratio=%.2f)", entry.intersection_ratio)
        self._release()

    # --- Rendering ---

    def render(self) -> str:
        """Child content once triggered, otherwise the fallback."""
        if self._state is GateState.TRIGGERED:
            if self._child is None:
                self._child = self._render_child()
            return self._child

        if self._options.fallback is not None:
            return self._options.fallback
        return DEFAULT_PLACEHOLDER

    # --- Introspection ---

    @property
    def state(self) -> GateState:
        return self._state

    @property
    def options(self) -> GateOptions:
        return self._options

    @property
    def is_observing(self) -> bool:
        return self._observer is not None

    @property
    def is_detached(self) -> bool:
        return self._detached

    @property
    def child_mounted(self) -> bool:
        return self._child is not None
