"""
Structured Logging

Every mutation of the Record Store and every recovered load failure is
logged as a structured event. The aggregation engine does not log: it
is pure and has nothing to report.

There is no persisted history of changes. Logs go to the standard
library logging handlers and nowhere else.
"""

import logging
import sys
from typing import Optional

import structlog

from event_budget.config import get_settings


def configure_logging(
    level: Optional[str] = None,
    json: Optional[bool] = None,
) -> None:
    """
    Configure structlog on top of the standard library logger.

    Args:
        level: Minimum level. Defaults to the configured log level.
        json: Render JSON lines (True) or console output (False).
              Defaults to the configured value.
    """
    app_settings = get_settings().app
    level = (level or app_settings.effective_log_level).upper()
    json = app_settings.log_json if json is None else json

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )
    logging.getLogger().setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, optionally named after a module."""
    return structlog.get_logger(name)
