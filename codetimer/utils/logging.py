"""Logging utilities built on top of :mod:`loguru`."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional

from loguru import logger


def setup_logging(log_file: Optional[Path] = None, level: str = "INFO") -> None:
    """Configure the global loguru logger.

    Args:
        log_file: Optional file path for log sink.
        level: Minimum log level (string understood by loguru).
    """

    logger.remove()
    logger.add(lambda msg: print(msg, end=""), level=level)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level=level, rotation="10 MB", retention="7 days")


def loguru_sink(level: str = "INFO", **extra: Any) -> Callable[[str], None]:
    """Build a timer ``log_action`` that forwards lines to loguru.

    Args:
        level: Level name or number used for every timer line.
        **extra: Values bound to each record's ``extra`` dict.
    """

    bound = logger.bind(**extra)

    def _sink(message: str) -> None:
        bound.log(level, message)

    return _sink


__all__ = ["setup_logging", "loguru_sink", "logger"]
