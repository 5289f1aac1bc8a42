"""Cross-platform directory resolution."""

from __future__ import annotations

import logging
from pathlib import Path

import platformdirs

logger = logging.getLogger("keyforge.paths")

_APP_NAME = "KeyForge"
_APP_AUTHOR = "KeyForge"


def get_data_dir() -> Path:
    """Return the platform-appropriate data directory (XDG on Linux)."""
    return Path(platformdirs.user_data_dir(_APP_NAME, _APP_AUTHOR))


# -- path helpers -----------------------------------------------------------
def get_settings_path(data_dir: Path) -> Path:
    return data_dir / "settings.ini"


def get_log_path(data_dir: Path) -> Path:
    return data_dir / "keyforge.log"
