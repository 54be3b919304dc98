"""Screen: capture, cached-image controllers, aspect ratio guard."""
from __future__ import annotations

from .guard import AspectRatioGuard, install_guard
from .ratio import BOUND_REL_TOL, TARGET_RATIO, TOLERANCE, Decision, calculate_aspect_ratio, evaluate, is_aspect_ratio_16x9
from .status import get_screen_status

__all__ = [
    "AspectRatioGuard",
    "install_guard",
    "Decision",
    "evaluate",
    "calculate_aspect_ratio",
    "is_aspect_ratio_16x9",
    "TARGET_RATIO",
    "TOLERANCE",
    "BOUND_REL_TOL",
    "get_screen_status",
]
