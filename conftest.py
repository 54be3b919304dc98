from __future__ import annotations

import os

import pytest


def _truthy_env(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "e2e: grabs the real screen (needs a display and RUN_E2E=1)")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Everything under tests/e2e/ is marked e2e and skipped unless RUN_E2E=1."""
    run_e2e = _truthy_env("RUN_E2E")
    skip_e2e = pytest.mark.skip(reason="E2E disabled by default (set RUN_E2E=1).")
    for item in items:
        path = str(getattr(item, "fspath", "")).replace("\\", "/")
        if "/tests/e2e/" not in path:
            continue
        item.add_marker(pytest.mark.e2e)
        if not run_e2e:
            item.add_marker(skip_e2e)
