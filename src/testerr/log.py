"""
Logging setup — structlog configured for human-readable console output.

The library itself logs very little: evaluation is silent, and only
caller mistakes that are tolerated rather than raised (a diagnostic
template that rejects its arguments, invalid settings, an error whose
str() raises) produce a warning.
"""

from __future__ import annotations

import logging

import structlog
from pydantic import ValidationError

from testerr.config import get_settings


def resolve_level(log_level: str | None) -> int:
    """
    Numeric level for a name; WARNING for unknown names or invalid settings.

    Without an explicit name, TESTERR_LOG_LEVEL (via settings) is used.
    """
    if log_level is None:
        try:
            log_level = get_settings().log_level
        except ValidationError:
            return logging.WARNING
    level = logging.getLevelName(log_level.strip().upper())
    if not isinstance(level, int):
        return logging.WARNING
    return level


def configure_structlog(log_level: str | None = None) -> None:
    """
    Configure structlog with a level filter and console rendering.

    Unknown level names fall back to WARNING rather than failing, so a
    typo in a test environment never breaks the suite.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_level(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
