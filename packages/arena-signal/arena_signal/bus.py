"""In-memory pub/sub bus with host-driven flush and rollback support."""
from __future__ import annotations

from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queues notifications until the host flushes them.

    Signals published inside a transaction that later rolls back are
    dropped with ``discard_after(mark)`` so the UI never hears about a
    mutation that did not happen.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def pending(self, signal_name: str | None = None) -> list[tuple[str, dict[str, Any]]]:
        if signal_name is None:
            return list(self._queue)
        return [item for item in self._queue if item[0] == signal_name]

    def mark(self) -> int:
        return len(self._queue)

    def discard_after(self, mark: int) -> None:
        del self._queue[mark:]

    def flush(self) -> int:
        """Dispatch queued signals in publish order. Returns how many were sent."""
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, [])):
                handler(signal_name, data)
        return len(snapshot)

    def clear(self) -> None:
        self._queue.clear()
