"""Centralised configuration and settings.ini I/O."""

from __future__ import annotations

import configparser
import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

logger = logging.getLogger("keyforge.config")


# ============================================================================
#  Config class
# ============================================================================
class Config:
    """Centralised settings."""

    # Generation
    DEFAULT_LENGTH = 16
    MIN_LENGTH = 1
    MAX_LENGTH = 64  # UI slider range
    HARD_MAX_LENGTH = 4096  # rejected by the core above this
    DEFAULT_CLASSES: Tuple[str, ...] = ("uppercase", "lowercase", "numbers", "symbols")

    # History
    HISTORY_SIZE = 6

    # Strength tiers
    WEAK_BELOW = 40
    STRONG_FROM = 70

    # UI
    CLIPBOARD_TIMEOUT = 15  # seconds

    @staticmethod
    def clamp_length(value) -> int:
        """Coerce raw UI input into ``[MIN_LENGTH, MAX_LENGTH]``."""
        try:
            length = int(float(value))
        except (TypeError, ValueError):
            return Config.DEFAULT_LENGTH
        return max(Config.MIN_LENGTH, min(Config.MAX_LENGTH, length))

    @staticmethod
    def settings_exists(data_dir: Path) -> bool:
        return (data_dir / "settings.ini").exists()


# ============================================================================
#  User settings (last used generator options)
# ============================================================================
@dataclass
class Settings:
    """Generator options remembered between launches."""

    length: int = Config.DEFAULT_LENGTH
    classes: Tuple[str, ...] = field(default_factory=lambda: Config.DEFAULT_CLASSES)

    @classmethod
    def load(cls, data_dir: Path) -> Settings:
        """Read settings.ini, falling back to defaults on any problem."""
        config_path = data_dir / "settings.ini"
        settings = cls()
        if not config_path.exists():
            return settings

        cfg = configparser.ConfigParser()
        try:
            cfg.read(config_path, encoding="utf-8")
            settings.length = Config.clamp_length(
                cfg.getint("generator", "length", fallback=Config.DEFAULT_LENGTH)
            )
            settings.classes = tuple(
                name
                for name in Config.DEFAULT_CLASSES
                if cfg.getboolean("generator", name, fallback=True)
            )
        except (configparser.Error, ValueError, OSError) as exc:
            logger.warning("Ignoring unreadable settings file: %s", exc)
            return cls()
        return settings

    def save(self, data_dir: Path) -> None:
        cfg = configparser.ConfigParser()
        cfg["generator"] = {"length": str(self.length)}
        for name in Config.DEFAULT_CLASSES:
            cfg["generator"][name] = "yes" if name in self.classes else "no"
        _write_config(data_dir, cfg)
        logger.info("Settings saved")


# ============================================================================
#  Atomic config writer
# ============================================================================
def _write_config(data_dir: Path, cfg: configparser.ConfigParser) -> None:
    data_dir.mkdir(parents=True, exist_ok=True)
    if os.name != "nt":
        try:
            os.chmod(data_dir, 0o700)
        except OSError:
            pass

    config_path = data_dir / "settings.ini"

    fd = tempfile.NamedTemporaryFile(
        mode="w", dir=data_dir, prefix="cfg_tmp_", suffix=".ini", delete=False
    )
    try:
        cfg.write(fd)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        tmp = Path(fd.name)
        if os.name != "nt":
            os.chmod(tmp, 0o600)
        tmp.replace(config_path)
    except BaseException:
        fd.close()
        try:
            Path(fd.name).unlink(missing_ok=True)
        except OSError:
            pass
        raise
