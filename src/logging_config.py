"""Logging configuration.

Modules log through ``logging.getLogger(__name__)`` and never configure
handlers themselves. Entry points (scripts, the host application) call
``configure_logging()`` once.
"""

from __future__ import annotations

import logging.config
from typing import Any

from src.config import get_settings

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_logging_config(level: str) -> dict[str, Any]:
    """Return a ``dictConfig`` mapping for the domain and application loggers."""
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": level,
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "domain": {"level": level},
            "src": {"level": level},
        },
        "root": {"handlers": ["console"], "level": level},
    }


def configure_logging(level: str | None = None) -> None:
    """Configure the Python logging system; level defaults to settings.log_level."""
    if level is None:
        level = get_settings().log_level
    logging.config.dictConfig(build_logging_config(level))
