"""
================================================================================
Logging Configuration
================================================================================

Centralized Loguru setup for the harness.

Call `init_logger()` once at process start (pytest_configure, run_tests.py).
Level and optional log file come from the `logging.level` / `logging.file`
settings (UI_LOGGING_LEVEL / UI_LOGGING_FILE in the environment).

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .settings import Settings


DEFAULT_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False


def init_logger(
    level: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        settings: Settings to read logging options from.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    settings = settings or Settings()
    log_level = str(level or settings.get("logging.level", "INFO")).upper()

    # Remove default logger and add configured one
    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=DEFAULT_LOG_FORMAT,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    log_file = settings.get("logging.file")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=DEFAULT_LOG_FORMAT.replace("{level: <8}", "{level}"),
            rotation=settings.get("logging.rotation", "10 MB"),
            retention=settings.get("logging.retention", "7 days"),
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def reset_logger() -> None:
    """Allow init_logger() to run again (used by tests)."""
    global _logger_initialized
    _logger_initialized = False


__all__ = [
    "init_logger",
    "reset_logger",
]
