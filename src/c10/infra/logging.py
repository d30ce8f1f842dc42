"""
Logging configuration for the C10 clock.

This module configures structlog for JSON logging. Log lines go to stderr:
stdout belongs to the clock display.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

from c10.domain.duration import NANOSECONDS_PER_TICK

from .settings import settings


def add_tick_context(_, __, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Attach a tick-denominated copy of any ``*_ns`` drift field."""
    for key in [k for k in event_dict if k.endswith("_ns")]:
        value = event_dict[key]
        if isinstance(value, int):
            event_dict[key[:-3] + "_ticks"] = round(value / NANOSECONDS_PER_TICK, 3)
    return event_dict


def configure_logging(level: str | None = None, stream: TextIO | None = None) -> None:
    """Configure structlog for JSON logging."""
    resolved = (level or settings.log_level).upper()
    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stderr,
        level=getattr(logging, resolved, logging.WARNING),
        force=True,
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
            add_tick_context,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a configured logger with service context."""
    logger = structlog.get_logger(name)
    return logger.bind(
        service="c10clock",
        env=settings.env,
    )
