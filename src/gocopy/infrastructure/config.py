"""Configuration constants read from the environment."""

from __future__ import annotations

import os
import sys

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

# "true" forces the read-only repair pass in remove_all, "false" disables it.
PERMISSION_REPAIR: str = os.environ.get("GOCOPY_PERMISSION_REPAIR", "").strip().lower()


def requires_permission_repair() -> bool:
    """Whether read-only files must be made writable before they can be deleted."""
    if PERMISSION_REPAIR in ("true", "false"):
        return PERMISSION_REPAIR == "true"
    return sys.platform == "win32"
