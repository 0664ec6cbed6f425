"""Logging configuration for fdkit."""

import logging
import sys
from pathlib import Path
from typing import Optional
from .settings import get_settings

LOGGER_NAMESPACE = "fdkit"

DEFAULT_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(message)s"
)


def _attach(logger: logging.Logger, handler: logging.Handler, level: int, fmt: str) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
) -> None:
    """
    Configure the fdkit logger.

    Messages go to stderr, keeping stdout for command output, and to
    log_file when one is given (or set through FDKIT_LOG_FILE).

    Args:
        level: Logging level name; defaults to FDKIT_LOG_LEVEL
        log_file: Optional file path for file logging
        format_string: Optional custom format string
    """
    settings = get_settings()
    log_level = getattr(logging, (level or settings.log_level).upper())
    log_file_path = log_file or settings.log_file
    fmt = format_string or DEFAULT_FORMAT

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(log_level)
    logger.handlers.clear()

    _attach(logger, logging.StreamHandler(sys.stderr), log_level, fmt)
    if log_file_path:
        _attach(logger, logging.FileHandler(log_file_path, encoding="utf-8"), log_level, fmt)

    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, placed under the fdkit namespace (configured on first use)."""
    if not logging.getLogger(LOGGER_NAMESPACE).handlers:
        setup_logging()

    if name.startswith(LOGGER_NAMESPACE):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
