"""Guard settings from environment, with an optional .env file (python-dotenv)."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

_log = logging.getLogger("aspectguard.config.settings")

_LOADED = False


def _truthy(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "y", "on")


@dataclass(frozen=True)
class Settings:
    enabled: bool
    log_level: str
    env_file: Optional[str]


def load_env_file(path: Optional[str] = None, *, override: bool = False) -> Optional[str]:
    """
    Load variables from a .env file once. ``path`` defaults to ASPECT_GUARD_ENV_FILE.
    Best-effort: a missing file is not an error. Returns the path used or None.
    """
    global _LOADED
    if _LOADED and not override:
        return None
    p = (path or os.getenv("ASPECT_GUARD_ENV_FILE") or "").strip()
    if not p or not Path(p).is_file():
        return None
    from dotenv import load_dotenv

    load_dotenv(p, override=override)
    _LOADED = True
    _log.debug(f"Loaded env file {p}")
    return p


def get_settings() -> Settings:
    """Read settings from the environment on every call."""
    load_env_file()
    level = (os.getenv("ASPECT_GUARD_LOG_LEVEL") or "INFO").strip().upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        level = "INFO"
    return Settings(
        enabled=_truthy(os.getenv("ASPECT_GUARD_ENABLED", "true")),
        log_level=level,
        env_file=(os.getenv("ASPECT_GUARD_ENV_FILE") or "").strip() or None,
    )
