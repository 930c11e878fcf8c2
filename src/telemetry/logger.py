"""
Structured Logging

Every module logs through structlog with event-style keys
(e.g. "activity_merged") and keyword context, never formatted strings.

The engine functions are pure, so logging is limited to debug-level
summaries of what was computed plus warnings for unexpected input shapes.

DESIGN DECISION: The engine is a library. Importing it only routes
structlog through the stdlib logging module (and only when the host has
not configured structlog itself), so the host's handlers and levels decide
what is emitted. Handlers, levels and the renderer are set up by
configure_logging(), which the host calls once at startup.
"""

import logging
import sys
from typing import Optional

import structlog

from src.config import LoggingSettings, get_settings


def _processors(renderer) -> list:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        renderer,
    ]


def _configure_structlog(renderer) -> None:
    structlog.configure(
        processors=_processors(renderer),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Route structlog through stdlib logging unless the host already configured it
if not structlog.is_configured():
    _configure_structlog(structlog.processors.JSONRenderer())


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Configure structlog and the stdlib root logger for a host process.

    Existing root handlers are kept; a stdout handler is added only when
    the root logger has none. Safe to call more than once.

    Args:
        settings: Logging settings. Loaded from the environment if None.
    """
    settings = settings or get_settings().logging
    level = getattr(logging, settings.level)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    logging.getLogger().setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.render_json
        else structlog.dev.ConsoleRenderer()
    )
    _configure_structlog(renderer)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Get a module logger.

    Use at module level: logger = get_logger(__name__)
    """
    return structlog.get_logger(name)
