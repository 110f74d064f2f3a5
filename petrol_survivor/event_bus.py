"""A deferred, type-dispatched event bus."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

Handler = Callable[[Any], None]


class EventBus:
    """Queues events on ``emit`` and delivers them to subscribers on ``flush``.

    Events are dispatched on their exact type. Events emitted by handlers while
    flushing are delivered in the same flush.
    """

    def __init__(self) -> None:
        self._handlers: Dict[type, List[Tuple[int, Handler]]] = {}
        self._queue: List[Any] = []
        self._next_id = 1

    def subscribe(self, event_type: type, handler: Handler) -> int:
        """Register ``handler`` for ``event_type`` and return its id."""
        if not callable(handler):
            raise TypeError("handler must be callable")
        handler_id = self._next_id
        self._next_id += 1
        self._handlers.setdefault(event_type, []).append((handler_id, handler))
        return handler_id

    def emit(self, event: Any) -> None:
        """Queue ``event`` for delivery on the next flush."""
        self._queue.append(event)

    def unsubscribe(self, event_type: type, handler_id: int) -> None:
        slots = self._handlers.get(event_type)
        if slots is None:
            return
        slots[:] = [slot for slot in slots if slot[0] != handler_id]

    def flush(self) -> None:
        """Deliver every queued event, including those queued during delivery."""
        cursor = 0
        while cursor < len(self._queue):
            event = self._queue[cursor]
            cursor += 1
            for _, handler in tuple(self._handlers.get(type(event), ())):
                handler(event)
        self._queue.clear()

    def clear(self) -> None:
        """Drop all queued events and subscribers, and restart handler ids."""
        self._queue.clear()
        self._handlers.clear()
        self._next_id = 1