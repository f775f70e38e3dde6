from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """Application configuration bundled in a single object."""

    log_level: str = DEFAULT_LOG_LEVEL
    log_dir: Optional[Path] = None

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load and cache configuration from environment variables.

    Raises:
        ValueError: if APPLIB_LOG_LEVEL is not a standard logging level name.
    """
    load_dotenv()

    log_level = os.getenv("APPLIB_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(
            f"Unknown APPLIB_LOG_LEVEL {log_level!r}; expected one of {', '.join(LOG_LEVELS)}"
        )

    raw_log_dir = os.getenv("APPLIB_LOG_DIR")
    log_dir = Path(raw_log_dir).expanduser() if raw_log_dir else None

    return Settings(log_level=log_level, log_dir=log_dir)


__all__ = ["Settings", "get_settings"]
