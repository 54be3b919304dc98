"""Tasker: in-process task runner publishing lifecycle events."""
from __future__ import annotations

from .engine import TaskResult, Tasker
from .models import POST_STOP_ENTRY, TASK_TOPIC, EventStatus, TaskDetail

__all__ = [
    "Tasker",
    "TaskResult",
    "TaskDetail",
    "EventStatus",
    "POST_STOP_ENTRY",
    "TASK_TOPIC",
]
