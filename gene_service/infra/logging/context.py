"""Context management for structured logging.

Provides automatic context injection into log records using contextvars,
so request-scoped values (correlation id, operation name) show up in every
log line without being passed around explicitly.

This approach is async-safe: each asyncio task sees its own copy of the
context.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any

_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


def set_log_context(**kwargs: Any) -> None:
    """Set logging context for the current async task.

    Example:
        set_log_context(correlation_id="abc-123", operation="GeneArtworks")
        logger.info("Resolving gene")  # Includes correlation_id and operation
    """
    current = _log_context.get().copy()
    current.update(kwargs)
    _log_context.set(current)


def get_log_context() -> dict[str, Any]:
    """Get a copy of the current logging context."""
    return _log_context.get().copy()


def clear_log_context() -> None:
    """Clear all logging context for the current async task."""
    _log_context.set({})


class ContextInjectingFilter(logging.Filter):
    """Logging filter that injects the contextvars log context into records.

    Attached to handlers by configure_logging(), so every logger benefits
    without code changes.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Inject context into log record.

        Returns:
            True (always allow the record to be logged).
        """
        for key, value in _log_context.get().items():
            # Don't overwrite existing attributes
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


__all__ = [
    "ContextInjectingFilter",
    "clear_log_context",
    "get_log_context",
    "set_log_context",
]
