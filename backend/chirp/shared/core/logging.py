"""
Logging Configuration

structlog on top of the stdlib logging module. Every record carries the
service name and environment, plus whatever the request middleware bound
(request_id, method, path).

Log Output:
===========
Development:
    2025-01-15T10:30:00Z [info     ] Post created  [chirp.shared.services.post_service] post_id=550e8400-...

Production / test (JSON, one object per line):
    {"event": "Post created", "post_id": "550e8400-...", "request_id": "...", "service": "chirp",
     "env": "production", "level": "info", "logger": "...", "timestamp": "2025-01-15T10:30:00Z"}

Usage:
======
    from chirp.shared.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Like created", post_id=str(post.id))
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from chirp.config.settings import settings

# uvicorn's access log duplicates RequestLoggingMiddleware
QUIET_LOGGERS = ("uvicorn.access", "passlib")


def _add_service(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("service", settings.APP_NAME.lower())
    event_dict.setdefault("env", settings.APP_ENV)
    return event_dict


def setup_logging() -> None:
    """
    Configure structlog and the stdlib root logger.

    Console renderer with colors in development, JSON everywhere else.
    Runs once, on import of this module.
    """
    level = getattr(logging, settings.LOG_LEVEL)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_service,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.is_development:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """Bind key/values to every log line emitted in the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Drop everything bound with log_context (end of request)."""
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("chirp")
