from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


def load_dotenv_if_present(path: str | Path = ".env") -> None:
    """Load environment variables from a .env file if it exists."""
    dotenv_path = Path(path)
    if dotenv_path.exists():
        load_dotenv(dotenv_path=dotenv_path, override=False)


def configure_logging(default_level: str = "INFO") -> None:
    """Configure root logging from LOG_LEVEL (default INFO) and optional LOG_FORMAT."""
    level_name = os.getenv("LOG_LEVEL", default_level).upper()
    level = getattr(logging, level_name, logging.INFO)
    log_format = os.getenv("LOG_FORMAT")
    if log_format:
        logging.basicConfig(level=level, format=log_format)
    else:
        logging.basicConfig(level=level)


def strict_dates_enabled() -> bool:
    return os.getenv("PHOTO_ALBUM_STRICT_DATES", "").strip().lower() in _TRUTHY


def results_album_name() -> str:
    name = os.getenv("PHOTO_ALBUM_RESULTS_NAME", "").strip()
    return name or "Search Results"
