"""
Structured logging setup.

Scoring modules log with `structlog.get_logger(__name__)` and snake_case
event names; this module wires the renderer and level from Settings.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog

from compliance_engine.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog: ISO timestamps, level, JSON or console output."""
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL, logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

