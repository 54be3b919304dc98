"""Guard kernel: the event bus tasker lifecycle events travel on."""
from __future__ import annotations

from .event_bus import EventBus, Handler

__all__ = ["EventBus", "Handler"]
