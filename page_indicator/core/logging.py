"""Structured logging configuration using structlog.

This module provides a centralized logging configuration that supports both
development (pretty-printed) and production (JSON) output formats.

Usage:
    from page_indicator.core.logging import get_logger, configure_logging

    # At application startup
    configure_logging(development=True)  # or False for production

    # In modules
    logger = get_logger(__name__)
    logger.warning("max_dots_not_odd", requested=4, using=5)

The window controller logs every scroll and wrap at DEBUG. Set
PAGE_INDICATOR_LOG_LEVEL to tune the page_indicator loggers separately from
the host application's LOG_LEVEL.
"""

import logging
import sys
from os import getenv
from typing import cast

import structlog
from structlog.types import Processor

PACKAGE_LOGGER = "page_indicator"

# Libraries whose DEBUG chatter drowns out indicator events
QUIET_LOGGERS = ("PIL", "asyncio")


def _level(name: str | None, default: int) -> int:
    if not name:
        return default
    return getattr(logging, name.upper(), default)


def configure_logging(
    development: bool | None = None,
    log_level: str | None = None,
    package_level: str | None = None,
) -> None:
    """Configure structured logging for the indicator and its hosts.

    Args:
        development: If True, use pretty-printed output. If False, use JSON.
                    If None, reads from ENVIRONMENT env var (default: development).
        log_level: Log level string (DEBUG, INFO, WARNING, ERROR).
                  If None, reads from LOG_LEVEL env var (default: INFO).
        package_level: Log level for the page_indicator loggers only.
                  If None, reads from PAGE_INDICATOR_LOG_LEVEL env var
                  (default: inherit the root level).
    """
    if development is None:
        env = getenv("ENVIRONMENT", "development").lower()
        development = env != "production"

    if log_level is None:
        log_level = getenv("LOG_LEVEL", "INFO")
    if package_level is None:
        package_level = getenv("PAGE_INDICATOR_LOG_LEVEL")

    numeric_level = _level(log_level, logging.INFO)

    # Common processors for all modes
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if development:
        # Development: pretty-printed, colored output
        processors: list[Processor] = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        # Production: JSON output for log aggregation
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # force=True overrides any handler a host framework installed first
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )
    logging.getLogger().setLevel(numeric_level)

    # NOTSET makes the package loggers follow the root level again
    logging.getLogger(PACKAGE_LOGGER).setLevel(_level(package_level, logging.NOTSET))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
