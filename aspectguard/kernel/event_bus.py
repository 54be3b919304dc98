"""In-memory synchronous event dispatch with per-handler error isolation.

Handlers run on the publishing thread, in subscription order. A handler that raises
is logged and counted; the remaining handlers still run and the failing handler
stays subscribed for the next publication.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, List

logger = logging.getLogger("aspectguard.kernel.event_bus")

Handler = Callable[..., None]


class EventBus:
    """Topic based event bus.

    Usage:
        bus = EventBus()
        unsubscribe = bus.subscribe("tasker.task", guard.on_task_event)
        bus.publish("tasker.task", tasker=tasker, event=event, detail=detail)
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[Handler]] = {}
        self._lock = threading.RLock()

    def subscribe(self, topic: str, handler: Handler) -> Callable[[], None]:
        """Subscribe ``handler`` to ``topic``. Returns an unsubscribe callable."""
        with self._lock:
            self._handlers.setdefault(topic, []).append(handler)
        logger.debug(f"Handler subscribed to '{topic}'")

        def unsubscribe() -> None:
            self.unsubscribe(topic, handler)

        return unsubscribe

    def unsubscribe(self, topic: str, handler: Handler) -> bool:
        """Unsubscribe by handler reference. True if it was found."""
        with self._lock:
            handlers = self._handlers.get(topic, [])
            if handler in handlers:
                handlers.remove(handler)
                return True
        return False

    def handler_count(self, topic: str) -> int:
        with self._lock:
            return len(self._handlers.get(topic, []))

    def publish(self, topic: str, *args: Any, **kwargs: Any) -> Dict[str, Any]:
        """Publish synchronously. Returns {ok, topic, handlers_called, handlers_failed}."""
        with self._lock:
            handlers = list(self._handlers.get(topic, []))

        failed = 0
        for handler in handlers:
            try:
                handler(*args, **kwargs)
            except Exception as e:
                failed += 1
                logger.warning(f"Handler error on '{topic}': {type(e).__name__}: {str(e)[:200]}")

        return {
            "ok": failed == 0,
            "topic": topic,
            "handlers_called": len(handlers),
            "handlers_failed": failed,
        }
