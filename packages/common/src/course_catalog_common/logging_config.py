"""Structured logging setup.

Every module obtains its logger through ``get_logger(__name__)`` and logs
events as ``logger.info("event_name", key=value, ...)``. The CLI calls
``configure_logging()`` once at startup; library code never configures.
"""

import logging
import sys
from typing import Optional

import structlog

from course_catalog_common.config import get_settings


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Configure structlog for console or JSON output on stderr.

    Args:
        level: Log level name (defaults to settings.log_level)
        fmt: "console" or "json" (defaults to settings.log_format)
    """
    settings = get_settings()
    level = (level or settings.log_level).upper()
    fmt = (fmt or settings.log_format).lower()

    if fmt == "json":
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None):
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
