"""
Logging Setup
=============
structlog configuration for applications embedding mailcodec.

Usage:
    from mailcodec.log import setup_logging

    setup_logging(level="DEBUG", json_output=False)
"""

import logging
import sys
from typing import Optional

import structlog

from . import config


def resolve_level(level: Optional[str] = None) -> int:
    """Map a level name to its logging constant, defaulting to WARNING."""
    name = (level or config.LOG_LEVEL).upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(
    level: Optional[str] = None,
    json_output: bool = True,
) -> structlog.typing.FilteringBoundLogger:
    """
    Configure structlog output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            defaults to MAILCODEC_LOG_LEVEL
        json_output: Render JSON lines instead of console output

    Returns:
        Logger bound to the mailcodec namespace
    """
    log_level = resolve_level(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger("mailcodec")
    logger.debug("logging.configured", log_level=logging.getLevelName(log_level))
    return logger
