"""Aspect ratio classification against 16:9 (either orientation)."""
from __future__ import annotations

import math
from dataclasses import dataclass

# Target aspect ratio: 16:9
TARGET_RATIO: float = 16.0 / 9.0
# Relative tolerance around TARGET_RATIO (±2%)
TOLERANCE: float = 0.02
# Relative slack on the band edge so sides landing exactly on it (e.g. 136x75) are not
# rejected by float rounding. Ratios more than this far past the edge are rejected.
BOUND_REL_TOL: float = 1e-9


@dataclass(frozen=True)
class Decision:
    accepted: bool
    computed_ratio: float


def calculate_aspect_ratio(width: int, height: int) -> float:
    """Larger side over smaller side, so landscape and portrait compare equal."""
    w = float(width)
    h = float(height)
    if w > h:
        return w / h
    return h / w


def evaluate(width: int, height: int) -> Decision:
    """Classify dimensions. Non-positive sides are rejected with ratio 0.0."""
    if width <= 0 or height <= 0:
        return Decision(accepted=False, computed_ratio=0.0)
    ratio = calculate_aspect_ratio(width, height)
    diff = abs(ratio - TARGET_RATIO)
    band = TARGET_RATIO * TOLERANCE
    accepted = diff <= band or math.isclose(diff, band, rel_tol=BOUND_REL_TOL)
    return Decision(accepted=accepted, computed_ratio=ratio)


def is_aspect_ratio_16x9(width: int, height: int) -> bool:
    return evaluate(width, height).accepted
