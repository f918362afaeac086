"""Synchronous event bus for split lifecycle events."""

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe hub for :mod:`splitcss.events.types` events.

    Hosts embedding the splitter subscribe to one event type or to all of
    them.  Listeners run synchronously on the emitting thread, global
    listeners first, each group in registration order.
    """

    def __init__(self) -> None:
        self._by_type: dict[type, list[Listener]] = {}
        self._catch_all: list[Listener] = []

    def subscribe(self, event_type: type, listener: Listener) -> None:
        self._by_type.setdefault(event_type, []).append(listener)

    def on_all(self, listener: Listener) -> None:
        self._catch_all.append(listener)

    def unsubscribe(self, event_type: type, listener: Listener) -> None:
        """Remove *listener* from *event_type*; unknown listeners are ignored."""
        listeners = self._by_type.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def emit(self, event: Any) -> None:
        for listener in self._catch_all:
            listener(event)
        for listener in self._by_type.get(type(event), []):
            listener(event)
