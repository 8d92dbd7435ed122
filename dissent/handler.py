"""Event dispatch, with delivery deferred onto a main loop."""

from __future__ import annotations

import itertools
import threading
from collections import deque
from typing import Any, Callable

Handler = Callable[[Any], None]


class EventHandler:
    """A registry of handlers keyed by the event type they accept."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count()
        self._handlers: dict[int, tuple[type | None, Handler]] = {}

    def add_handler(self, handler: Handler, event_type: type | None = None) -> Callable[[], None]:
        """Register a handler for events of ``event_type`` (all events if None).

        Returns a function that removes the handler again.
        """
        with self._lock:
            key = next(self._ids)
            self._handlers[key] = (event_type, handler)

        def remove() -> None:
            with self._lock:
                self._handlers.pop(key, None)

        return remove

    def callers_for(self, event: Any) -> list[Handler]:
        """Return the handlers that accept ``event``, in registration order."""
        with self._lock:
            entries = list(self._handlers.values())
        return [
            handler
            for event_type, handler in entries
            if event_type is None or isinstance(event, event_type)
        ]

    def dispatch(self, event: Any) -> None:
        """Call every matching handler with ``event`` right away."""
        for handler in self.callers_for(event):
            handler(event)


class MainLoop:
    """A queue of callbacks to be run later on the owning thread."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending: deque[Callable[[], None]] = deque()

    def idle_add(self, fn: Callable[[], None]) -> None:
        """Schedule ``fn`` to run on the next pass."""
        with self._lock:
            self._pending.append(fn)

    def run_pending(self) -> int:
        """Run the callbacks queued so far and return how many ran.

        Callbacks scheduled while running wait for the next pass.
        """
        with self._lock:
            batch, self._pending = self._pending, deque()
        for fn in batch:
            fn()
        return len(batch)


class MainThreadHandler:
    """Relays events from a source handler so they are delivered on a main loop."""

    def __init__(self, source: EventHandler, loop: MainLoop) -> None:
        self._handlers = EventHandler()
        self._loop = loop
        source.add_handler(self._relay)

    def _relay(self, event: Any) -> None:
        callers = self._handlers.callers_for(event)
        if not callers:
            return

        def deliver() -> None:
            for caller in callers:
                caller(event)

        self._loop.idle_add(deliver)

    def add_handler(self, handler: Handler, event_type: type | None = None) -> Callable[[], None]:
        """Register a handler run on the main loop; returns its remover."""
        return self._handlers.add_handler(handler, event_type)

    def add_sync_handler(self, handler: Handler, event_type: type | None = None) -> Callable[[], None]:
        """Same as :meth:`add_handler`."""
        return self.add_handler(handler, event_type)