"""
Configuration for counterlist.

Settings come from the environment (optionally populated from a .env file)
so that hosts can point the store at their own app-data directory:

- COUNTERLIST_DATA_DIR: directory holding the counters file
- COUNTERLIST_FILE_NAME: file name, counters.json by default
- COUNTERLIST_ASYNC_SAVES: write saves on a background worker
- COUNTERLIST_LOG_LEVEL: level for the counterlist logger
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


DEFAULT_FILE_NAME = "counters.json"
DEFAULT_DATA_DIR = Path.home() / ".counterlist"


@dataclass(frozen=True)
class Settings:
    """Resolved configuration."""

    data_dir: Path
    file_name: str = DEFAULT_FILE_NAME
    async_saves: bool = True
    log_level: str = "WARNING"

    @property
    def save_path(self) -> Path:
        return self.data_dir / self.file_name


def _bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@lru_cache
def get_settings() -> Settings:
    """Read the environment (and .env, if present) into a Settings instance."""
    load_dotenv()

    data_dir = os.getenv("COUNTERLIST_DATA_DIR")
    return Settings(
        data_dir=Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR,
        file_name=os.getenv("COUNTERLIST_FILE_NAME") or DEFAULT_FILE_NAME,
        async_saves=_bool(os.getenv("COUNTERLIST_ASYNC_SAVES"), True),
        log_level=(os.getenv("COUNTERLIST_LOG_LEVEL") or "WARNING").upper(),
    )


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Args:
        level: Level name; defaults to the configured log level

    Returns:
        The "counterlist" logger
    """
    logger = logging.getLogger("counterlist")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(level or get_settings().log_level)
    return logger
