"""Structured logging configuration.

This module initializes structlog with a stable JSON format on stderr.
Stdout stays reserved for converted Markdown.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structlog processors and level filtering.

    Args:
        level: Minimum level name, e.g. ``"INFO"``.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    # Resolve sys.stderr per logger so redirected streams are honored.
    return structlog.PrintLogger(file=sys.stderr)


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    if isinstance(resolved, int):
        return resolved
    return logging.WARNING
