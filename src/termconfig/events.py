"""Lifecycle event registry

Host adapters emit lifecycle events (``update-status`` after each status
refresh); user code subscribes with ``on``. Callbacks may be sync or async
and are isolated from each other: a failing callback is logged and counted,
never propagated.
"""

import inspect
from collections.abc import Callable
from typing import Any

from . import config
from .telemetry import get_logger, metrics

logger = get_logger(__name__)

UPDATE_STATUS = "update-status"


class EventRegistry:
    """Event name -> ordered callback list."""

    def __init__(self):
        self._handlers: dict[str, list[Callable[..., Any]]] = {}

    def on(self, event: str, callback: Callable[..., Any]) -> None:
        """Subscribe a callback to an event."""
        self._handlers.setdefault(event, []).append(callback)
        logger.debug(f"[Events] Subscribed to {event}: {getattr(callback, '__name__', callback)}")

    def off(self, event: str, callback: Callable[..., Any]) -> bool:
        """Unsubscribe a callback. Returns whether it was registered."""
        handlers = self._handlers.get(event, [])
        if callback in handlers:
            handlers.remove(callback)
            return True
        return False

    def handler_count(self, event: str) -> int:
        return len(self._handlers.get(event, []))

    async def emit(self, event: str, *args: Any) -> int:
        """Invoke all callbacks for an event.

        Returns:
            Number of callbacks that completed without raising
        """
        succeeded = 0
        for callback in list(self._handlers.get(event, [])):
            try:
                result = callback(*args)
                if inspect.iscoroutine(result):
                    await result
                succeeded += 1
            except Exception as e:
                logger.error(f"[Events] Handler for {event} failed: {e}")
                if config.METRICS_ENABLED:
                    metrics.inc("events.errors", {"event": event})
        return succeeded
