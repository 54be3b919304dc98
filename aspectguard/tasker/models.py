"""Tasker models: lifecycle status, task detail, reserved entries."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Topic the tasker publishes lifecycle events on (kwargs: tasker, event, detail).
TASK_TOPIC = "tasker.task"

# Entry used for the bookkeeping task the tasker runs after a stop request.
POST_STOP_ENTRY = "MaaTaskerPostStop"


class EventStatus(str, Enum):
    STARTING = "starting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    STOPPING = "stopping"


@dataclass(frozen=True)
class TaskDetail:
    """Descriptor of one posted task."""
    task_id: int
    entry: str
