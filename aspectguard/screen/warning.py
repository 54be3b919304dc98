"""Warning payload shown to the user when the screen ratio is rejected."""
from __future__ import annotations

import sys
from functools import lru_cache
from importlib import resources
from typing import Optional, TextIO


@lru_cache(maxsize=1)
def warning_message() -> str:
    return resources.files(__package__).joinpath("warning_message.html").read_text(encoding="utf-8")


def emit_warning(sink: Optional[TextIO] = None) -> None:
    """Write the warning verbatim to ``sink`` (stdout by default)."""
    out = sink if sink is not None else sys.stdout
    print(warning_message(), file=out)
