"""Aspect ratio guard: stops a task before it runs when the screen is not 16:9.

The guard is a tasker hook. On every STARTING event it reads the controller's cached
screenshot, classifies its size with ``ratio.evaluate`` and, when rejected, posts a
stop and shows the warning. Infrastructure problems (no controller, no image, no usable
bounds) only log: the task keeps running unguarded for that invocation.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional, TextIO

from aspectguard.kernel.event_bus import EventBus
from aspectguard.tasker.models import POST_STOP_ENTRY, TASK_TOPIC, EventStatus, TaskDetail

from .ratio import TARGET_RATIO, evaluate
from .warning import emit_warning

_log = logging.getLogger("aspectguard.screen.guard")


class AspectRatioGuard:
    """Checks the device resolution is 16:9 before task execution."""

    def __init__(self, warning_sink: Optional[TextIO] = None) -> None:
        self._warning_sink = warning_sink

    def register(self, bus: EventBus) -> Callable[[], None]:
        """Subscribe to tasker lifecycle events. Returns the unsubscribe callable."""
        return bus.subscribe(TASK_TOPIC, self.on_task_event)

    def on_task_event(self, tasker: Any, event: EventStatus, detail: TaskDetail) -> None:
        # Only check on task starting
        if event != EventStatus.STARTING:
            return

        if detail.entry == POST_STOP_ENTRY:
            _log.debug("Received PostStop event, skipping aspect ratio check")
            return

        fields = {"task_id": detail.task_id, "entry": detail.entry}
        _log.debug(
            f"Checking aspect ratio before task execution task_id={detail.task_id} entry={detail.entry}",
            extra=fields,
        )

        controller = tasker.get_controller()
        if controller is None:
            _log.error("Failed to get controller from tasker", extra=fields)
            return

        try:
            img, err = controller.cache_image()
            if not err and img is not None:
                width, height = (int(v) for v in img.size)
        except Exception as e:
            img, err = None, f"{type(e).__name__}: {e}"
        if err or img is None:
            _log.error(f"Failed to get cached image: {err or 'no image'}", extra=fields)
            return

        fields.update(width=width, height=height)
        _log.debug(f"Got screenshot dimensions width={width} height={height}", extra=fields)

        decision = evaluate(width, height)
        if decision.accepted:
            _log.debug(f"Resolution check passed: 16:9 width={width} height={height}", extra=fields)
            return

        fields.update(actual_ratio=decision.computed_ratio, target_ratio=TARGET_RATIO)
        _log.error(
            f"Resolution is not 16:9! Task will be stopped. width={width} height={height} "
            f"actual_ratio={decision.computed_ratio:.4f} target_ratio={TARGET_RATIO:.4f}",
            extra=fields,
        )
        try:
            emit_warning(self._warning_sink)
        except Exception as e:
            _log.error(f"Failed to emit resolution warning: {type(e).__name__}: {e}", extra=fields)
        finally:
            tasker.post_stop()


def install_guard(bus: EventBus, warning_sink: Optional[TextIO] = None) -> Optional[Callable[[], None]]:
    """Subscribe a guard to ``bus``. Returns the unsubscribe callable.

    Returns None when disabled through ASPECT_GUARD_ENABLED.
    """
    from aspectguard.config import get_settings

    if not get_settings().enabled:
        _log.info("Aspect ratio guard disabled (ASPECT_GUARD_ENABLED=false)")
        return None
    return AspectRatioGuard(warning_sink=warning_sink).register(bus)
