"""Structured logging configuration.

This module initializes structlog with a stable JSON line format.
All records go to stderr so command output on stdout stays parseable.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL


def configure_logging(level: str = DEFAULT_LOG_LEVEL, quiet: bool = False) -> None:
    """Configure process-wide structured logging.

    Args:
        level: Minimum level name, e.g. "error".
        quiet: Suppress everything below critical when true.
    """
    level_number = logging.CRITICAL if quiet else logging.getLevelName(level.upper())
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_number),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Configures the default stderr JSON output first when nothing has
    configured structlog yet, so SDK callers never log to stdout.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog bound logger.
    """
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)
