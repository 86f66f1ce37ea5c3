"""Runtime logging helpers."""

from __future__ import annotations

import sys

from loguru import logger

from shroom.errors import ConfigurationError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED_LEVEL: str | None = None


def configure_logging(*, level: str = "WARNING") -> None:
    """Configure process-level logging once per level."""
    global _CONFIGURED_LEVEL

    normalized = level.strip().upper()
    if normalized not in LOG_LEVELS:
        raise ConfigurationError(f"unknown log level: {level}")
    if normalized == _CONFIGURED_LEVEL:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        level=normalized,
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    _CONFIGURED_LEVEL = normalized
