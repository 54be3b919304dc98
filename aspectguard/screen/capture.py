"""Screenshot: full screen or region into a PIL image. Prefer mss, fallback pyautogui."""
from __future__ import annotations

from typing import Optional, Tuple

from PIL import Image

from .status import _screen_deps_ok

Region = Tuple[int, int, int, int]


def capture_screen(region: Optional[Region] = None) -> Tuple[Optional[Image.Image], str]:
    """
    Capture screen. region = (x, y, w, h) or None for the full virtual screen.
    Returns (image, error_message). error_message empty on success.
    """
    if not _screen_deps_ok():
        return None, "screen capture disabled: missing deps (mss/pyautogui)"
    try:
        return _capture(region)
    except Exception as e:
        return None, str(e)


def _capture(region: Optional[Region]) -> Tuple[Optional[Image.Image], str]:
    try:
        import mss
        with mss.mss() as sct:
            if region:
                x, y, w, h = region
                mon = {"left": x, "top": y, "width": w, "height": h}
            else:
                mon = sct.monitors[0]
            shot = sct.grab(mon)
            return Image.frombytes("RGB", shot.size, shot.bgra, "raw", "BGRX"), ""
    except ImportError:
        pass
    try:
        import pyautogui
        return pyautogui.screenshot(region=region), ""
    except Exception as e:
        return None, str(e)
