"""Logging setup shared by the CLI and the HTTP application."""

from __future__ import annotations

import logging
import logging.config
from typing import Optional, Union

DEFAULT_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"


def configure_logging(level: Union[str, int, None] = None, fmt: Optional[str] = None) -> None:
    """Install a single stream handler on the root logger."""
    if level is None:
        level = logging.INFO
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"format": fmt or DEFAULT_FORMAT}},
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "level": level,
                }
            },
            "root": {"handlers": ["console"], "level": level},
            # httpx logs every request at INFO; keep it out of status output
            "loggers": {
                "httpx": {"level": max(level, logging.WARNING)},
                "httpcore": {"level": max(level, logging.WARNING)},
            },
        }
    )
