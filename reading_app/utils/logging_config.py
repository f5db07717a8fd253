"""Logging configuration helpers for ReadingQt."""

from __future__ import annotations

import logging
import os
from logging import Logger

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | None = None) -> Logger:
    """Configure root logging once and return the application logger.

    The level falls back to ``READINGQT_LOG_LEVEL`` and then INFO.
    """
    level_name = (level or os.environ.get("READINGQT_LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=_LOG_FORMAT,
    )
    return logging.getLogger("reading_app")
