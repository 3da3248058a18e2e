"""
core/logging.py
---------------
Structured logging using structlog.
DEBUG=true  → human-readable console output
DEBUG=false → JSON, one object per line

LOG_LEVEL overrides the level implied by DEBUG. The acting identity of a
request is bound into structlog's contextvars, so every event logged while
serving it carries user_id / company_id.
"""

import logging
import sys
from typing import Optional

import structlog

from iomad_admin.core.config import settings
from iomad_admin.core.security import Identity

# Chatty in DEBUG, only warnings otherwise
_NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "aiosqlite")


def resolve_log_level() -> int:
    if settings.LOG_LEVEL:
        return logging.getLevelName(settings.LOG_LEVEL.upper())
    return logging.DEBUG if settings.DEBUG else logging.INFO


def configure_logging() -> None:
    log_level = resolve_log_level()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    if not settings.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def bind_identity(identity: Optional[Identity]) -> None:
    """Attach the acting identity to every log event of the current request."""
    structlog.contextvars.clear_contextvars()
    if identity is not None:
        structlog.contextvars.bind_contextvars(
            user_id=identity.user_id,
            company_id=identity.company_id,
        )


def get_logger(name: str = __name__):
    return structlog.get_logger(name)
