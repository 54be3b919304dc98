"""Tasker: runs posted tasks one at a time and publishes their lifecycle on the event bus.

Hooks subscribed to TASK_TOPIC receive ``tasker``, ``event`` and ``detail`` kwargs
and may call ``tasker.post_stop()`` while a task is STARTING to prevent it from running.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Optional, Set

from aspectguard.kernel.event_bus import EventBus

from .models import POST_STOP_ENTRY, TASK_TOPIC, EventStatus, TaskDetail

_log = logging.getLogger("aspectguard.tasker.engine")


@dataclass(frozen=True)
class TaskResult:
    detail: TaskDetail
    status: EventStatus
    error: Optional[str] = None

    @property
    def stopped(self) -> bool:
        return self.status == EventStatus.STOPPING


class Tasker:
    """In-process host scheduler. Max concurrency 1 (tasks are serialized)."""

    def __init__(self, events: Optional[EventBus] = None, controller: Any = None) -> None:
        self.events = events if events is not None else EventBus()
        self._controller = controller
        self._run_lock = threading.Lock()
        self._state_lock = threading.Lock()
        self._next_id = 0
        self._current: Optional[TaskDetail] = None
        self._stop_requested: Set[int] = set()

    def bind(self, controller: Any) -> None:
        self._controller = controller

    def get_controller(self) -> Any:
        return self._controller

    @property
    def running(self) -> bool:
        with self._state_lock:
            return self._current is not None

    @property
    def stopping(self) -> bool:
        with self._state_lock:
            return self._current is not None and self._current.task_id in self._stop_requested

    def _new_detail(self, entry: str) -> TaskDetail:
        with self._state_lock:
            self._next_id += 1
            return TaskDetail(task_id=self._next_id, entry=entry)

    def _emit(self, event: EventStatus, detail: TaskDetail) -> None:
        self.events.publish(TASK_TOPIC, tasker=self, event=event, detail=detail)

    def post_task(self, entry: str, action: Optional[Callable[[], Any]] = None) -> TaskResult:
        """Run one task synchronously: STARTING, then SUCCEEDED/FAILED, or STOPPING if a hook stopped it."""
        with self._run_lock:
            detail = self._new_detail(entry)
            with self._state_lock:
                self._current = detail
            try:
                _log.debug(f"Task starting task_id={detail.task_id} entry={entry}")
                self._emit(EventStatus.STARTING, detail)

                with self._state_lock:
                    stop = detail.task_id in self._stop_requested
                if stop:
                    _log.info(f"Task stopped before running task_id={detail.task_id} entry={entry}")
                    self._emit(EventStatus.STOPPING, detail)
                    return TaskResult(detail=detail, status=EventStatus.STOPPING)

                try:
                    if action is not None:
                        action()
                except Exception as e:
                    err = f"{type(e).__name__}: {str(e)[:200]}"
                    _log.exception(f"Task failed task_id={detail.task_id} entry={entry}")
                    self._emit(EventStatus.FAILED, detail)
                    return TaskResult(detail=detail, status=EventStatus.FAILED, error=err)

                self._emit(EventStatus.SUCCEEDED, detail)
                return TaskResult(detail=detail, status=EventStatus.SUCCEEDED)
            finally:
                with self._state_lock:
                    self._current = None
                    self._stop_requested.discard(detail.task_id)

    def post_stop(self) -> TaskDetail:
        """Request the in-flight task to stop. Runs the POST_STOP_ENTRY bookkeeping task."""
        with self._state_lock:
            current = self._current
            if current is not None:
                self._stop_requested.add(current.task_id)
        if current is not None:
            _log.info(f"Stop requested task_id={current.task_id} entry={current.entry}")
        else:
            _log.info("Stop requested with no task in flight")

        detail = self._new_detail(POST_STOP_ENTRY)
        self._emit(EventStatus.STARTING, detail)
        self._emit(EventStatus.SUCCEEDED, detail)
        return detail
