"""
================================================================================
Global Logging Configuration
================================================================================

Centralized Loguru setup shared by the suite, the runner and the report tools.

Features:
    - One-time initialization per process
    - Level, format and file sink driven by environment variables
    - Rotating, compressed file logs when LOG_FILE is set

Environment:
    LOG_LEVEL      DEBUG / INFO / WARNING / ERROR (default INFO)
    LOG_FORMAT     Loguru format string
    LOG_FILE       Optional log file path
    LOG_ROTATION   File rotation policy (default "10 MB")
    LOG_RETENTION  File retention policy (default "7 days")

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"

_logger_initialized: bool = False


def init_logger(level: Optional[str] = None, format_str: Optional[str] = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Call at the start of any entry point (pytest session, runner, report
    generation). Subsequent calls are no-ops until reset_logger().

    Args:
        level: Log level. Defaults to $LOG_LEVEL or INFO.
        format_str: Custom log format string. Defaults to $LOG_FORMAT.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_format = format_str or os.getenv("LOG_FORMAT", DEFAULT_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    log_file = os.getenv("LOG_FILE")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=os.getenv("LOG_ROTATION", "10 MB"),
            retention=os.getenv("LOG_RETENTION", "7 days"),
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def get_logger():
    """
    Returns the configured Loguru logger instance.

    Ensures the logger is initialized before returning.
    """
    if not _logger_initialized:
        init_logger()
    return logger


def reset_logger() -> None:
    """Allow init_logger() to reconfigure sinks (used by tests)."""
    global _logger_initialized
    _logger_initialized = False
