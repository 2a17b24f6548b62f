"""Logger configuration for fpx."""

from __future__ import annotations

import logging
import os
import sys

__all__ = ("get_logger", "logger", "setup_logger")


def setup_logger(
    name: str = "fpx",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return the package logger.

    Args:
        name: Logger name (the package root by default)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Falls back to FPX_LOG_LEVEL, then WARNING. Unknown names
            also mean WARNING.
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv("FPX_LOG_LEVEL", "WARNING")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    log = logging.getLogger(name)

    # Only configure if not already configured
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        log.addHandler(handler)
        resolved = logging.getLevelNamesMapping().get(level.upper())
        log.setLevel(resolved if resolved is not None else logging.WARNING)
        if resolved is None:
            log.warning("Unknown log level %r, using WARNING", level)

    return log


def get_logger(name: str) -> logging.Logger:
    """Child logger for a module (``get_logger(__name__)``)."""
    return logging.getLogger(name)


logger = setup_logger()
