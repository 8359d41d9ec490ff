"""
Structured Logging Configuration
Structured logging with structlog.

Meeting lookups are logged with the user and meeting they concern; use
log_context() to bind those ids for a block of repository calls.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Any, Dict, Iterator

import structlog
from structlog.types import Processor

from app.core.config import settings

# Database driver loggers kept at WARNING unless settings.debug
DB_LOGGERS = ["sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg"]


def add_app_context(
    logger: logging.Logger, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Add application context to log events."""
    event_dict["app"] = settings.app_name
    event_dict["env"] = settings.app_env
    return event_dict


@contextmanager
def log_context(**ids: Any) -> Iterator[None]:
    """Bind ids such as user_id or meeting_id to every log event in the block."""
    bound = {key: value for key, value in ids.items() if value is not None}
    with structlog.contextvars.bound_contextvars(**bound):
        yield


def setup_logging() -> None:
    """Configure structured logging for the application."""

    is_development = settings.app_env == "development"
    log_level = getattr(logging, settings.log_level.upper())

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if is_development:
        renderer: Processor = structlog.dev.ConsoleRenderer(colors=True)
        processors = shared_processors + [renderer]
    else:
        # JSON lines for log aggregation
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    db_level = logging.INFO if settings.debug else logging.WARNING
    for logger_name in DB_LOGGERS:
        logging.getLogger(logger_name).setLevel(db_level)


def get_logger(name: str = __name__) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
