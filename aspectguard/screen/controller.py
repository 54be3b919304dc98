"""Controllers: hold the most recent screen capture for hooks to inspect."""
from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image

from .capture import Region, capture_screen

_log = logging.getLogger("aspectguard.screen.controller")


class ScreenController:
    """Captures the local screen on demand and caches the last image."""

    def __init__(self, region: Optional[Region] = None) -> None:
        self._region = region
        self._lock = threading.Lock()
        self._cached: Optional[Image.Image] = None

    def post_screencap(self) -> Tuple[bool, str]:
        """Capture now and replace the cached image. Returns (ok, error)."""
        img, err = capture_screen(region=self._region)
        if err or img is None:
            _log.warning(f"Screencap failed: {err or 'no image'}")
            return False, err or "no image"
        with self._lock:
            self._cached = img
        _log.debug(f"Screencap cached width={img.size[0]} height={img.size[1]}")
        return True, ""

    def cache_image(self) -> Tuple[Optional[Image.Image], str]:
        """Most recent cached capture. (None, error) when nothing has been captured."""
        with self._lock:
            img = self._cached
        if img is None:
            return None, "no cached image"
        return img, ""


class StaticController:
    """Serves a fixed image as the cached capture (image files, tests)."""

    def __init__(self, image: Union[Image.Image, str, Path, None]) -> None:
        if isinstance(image, (str, Path)):
            with Image.open(image) as im:
                im.load()
                image = im.copy()
        self._image = image

    def post_screencap(self) -> Tuple[bool, str]:
        if self._image is None:
            return False, "no image"
        return True, ""

    def cache_image(self) -> Tuple[Optional[Image.Image], str]:
        if self._image is None:
            return None, "no cached image"
        return self._image, ""
