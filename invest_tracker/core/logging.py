"""Logging setup shared by the API process and the scripts."""

import logging

from invest_tracker.core.config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure the root logger with ISO-8601 timestamps."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=_LOG_FORMAT,
        datefmt=_DATE_FORMAT,
    )
