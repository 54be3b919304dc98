"""Configuration: environment variables and .env loading."""
from __future__ import annotations

from .settings import Settings, get_settings, load_env_file

__all__ = ["Settings", "get_settings", "load_env_file"]
