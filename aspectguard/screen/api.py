"""Aspect ratio endpoints: guard status and ad-hoc dimension checks."""
from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(prefix="/screen/aspect-ratio", tags=["Screen"])


@router.get("/status")
def aspect_ratio_status():
    try:
        from .ratio import TARGET_RATIO, TOLERANCE
        from .status import get_screen_status

        return {**get_screen_status(), "target_ratio": TARGET_RATIO, "tolerance": TOLERANCE}
    except Exception as e:
        return {"ok": False, "error": str(e)}


class CheckBody(BaseModel):
    width: int
    height: int


@router.post("/check")
def aspect_ratio_check(body: CheckBody):
    try:
        from .ratio import TARGET_RATIO, evaluate

        decision = evaluate(body.width, body.height)
        return {
            "ok": True,
            "accepted": decision.accepted,
            "computed_ratio": decision.computed_ratio,
            "target_ratio": TARGET_RATIO,
        }
    except Exception as e:
        return {"ok": False, "error": str(e)}
