"""Runtime logging helpers."""

from __future__ import annotations

import sys

from loguru import logger

from pwshort.config import get_settings

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED_LEVEL: str | None = None


def configure_logging(level: str | None = None) -> None:
    """Configure process-level logging once per level.

    Without an explicit level, `Settings.log_level` is used, so
    `PWSHORT_LOG_LEVEL` may come from the environment or `.env`.
    """

    global _CONFIGURED_LEVEL
    resolved = (level or get_settings().log_level).upper()
    if resolved == _CONFIGURED_LEVEL:
        return

    logger.enable("pwshort")
    logger.remove()
    logger.add(
        sys.stderr,
        level=resolved,
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    _CONFIGURED_LEVEL = resolved
