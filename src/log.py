"""Structured logging setup."""

import logging

import structlog


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog to emit key/value events at or above ``level``.
    
    Args:
        level: Standard logging level name (e.g. "INFO", "DEBUG").
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
        ),
    )


def truncate(value: str | None, length: int = 8) -> str | None:
    """Shorten identifying values (user ids, addresses) before logging them."""
    if not value:
        return None
    if len(value) <= length:
        return value
    return f"{value[:length]}..."
