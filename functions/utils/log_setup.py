"""structlog configuration for BuildMarket entry points."""

import logging
import sys
from typing import Optional

import structlog

from config.settings import settings


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structlog with ISO timestamps and console rendering.

    Log lines go to stderr so command output on stdout stays parseable.

    Args:
        level: Log level name (defaults to settings.log_level).
    """
    level_name = (level or settings.log_level).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
