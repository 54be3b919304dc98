"""aspectguard: stops automation tasks when the captured screen is not 16:9."""
from __future__ import annotations

__version__ = "0.1.0"
