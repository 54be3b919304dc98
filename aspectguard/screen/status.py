"""Screen capture status: enabled/disabled from deps."""
from __future__ import annotations

from typing import Any, Dict, List

_screen_deps_cache: Dict[str, bool] = {}


def _importable(name: str) -> bool:
    if name in _screen_deps_cache:
        return _screen_deps_cache[name]
    try:
        __import__(name)
        ok = True
    except Exception:
        ok = False
    _screen_deps_cache[name] = ok
    return ok


def _screen_deps_ok() -> bool:
    """True if at least mss or pyautogui is available for capture."""
    return _importable("mss") or _importable("pyautogui")


def get_screen_status() -> Dict[str, Any]:
    """Always responds; enabled=false when no capture backend is importable."""
    missing: List[str] = [n for n in ("mss", "pyautogui") if not _importable(n)]
    enabled = _screen_deps_ok()
    return {
        "ok": True,
        "enabled": enabled,
        "module": "screen",
        "missing_deps": missing,
        "suggested": "" if enabled else "pip install mss",
    }
