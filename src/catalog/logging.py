"""
Centralized logging configuration using structlog
"""

import base64
import logging
import secrets
import sys
import time

import structlog
from structlog.contextvars import bind_contextvars, get_contextvars, unbind_contextvars

REQUEST_ID_KEY = "request_id"

# 48 bits of microseconds since the epoch wrap roughly every 8.9 years
_TIMESTAMP_BYTES = 6
_RANDOM_BYTES = 2


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        debug: Human-readable console output when True, JSON lines otherwise.
        level: Explicit level name (e.g. "WARNING"); defaults to DEBUG/INFO from debug.
    """
    if level is None:
        log_level = logging.DEBUG if debug else logging.INFO
    else:
        log_level = logging.getLevelName(level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        # Request id bound per GraphQL request
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance (typically for __name__)."""
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Generate an 11-character URL-safe request ID.

    Packs the low 48 bits of the microsecond clock with 2 random bytes;
    8 bytes encode to 11 base64 characters once padding is stripped.
    """
    timestamp_us = int(time.time() * 1_000_000) % (1 << (8 * _TIMESTAMP_BYTES))

    raw = timestamp_us.to_bytes(_TIMESTAMP_BYTES, byteorder="big") + secrets.token_bytes(
        _RANDOM_BYTES
    )

    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def set_request_context(request_id: str | None = None) -> str:
    """Bind a request ID to every log line in the current context.

    Returns:
        The request ID now in effect (generated when None or empty)
    """
    request_id = request_id or generate_request_id()
    bind_contextvars(**{REQUEST_ID_KEY: request_id})
    return request_id


def clear_request_context() -> None:
    unbind_contextvars(REQUEST_ID_KEY)


def get_request_id() -> str | None:
    return get_contextvars().get(REQUEST_ID_KEY)
