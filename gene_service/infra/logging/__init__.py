"""Logging infrastructure.

Structured logging on top of the standard library:
- JSONL format for Loki/Elasticsearch ingestion
- Automatic context injection (correlation_id, operation name, ...)
- Lazy evaluation for expensive debug messages
- OpenTelemetry trace correlation

Basic usage:
    import logging

    from gene_service.infra.logging import set_log_context

    logger = logging.getLogger(__name__)

    set_log_context(correlation_id="abc-123")
    logger.info("Resolving gene")  # Includes correlation_id
"""

from gene_service.infra.logging.config import configure_logging, setup_logging
from gene_service.infra.logging.context import (
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    set_log_context,
)
from gene_service.infra.logging.formatters import JSONFormatter
from gene_service.infra.logging.lazy import LazyLoggerAdapter, get_lazy_logger

__all__ = [
    "ContextInjectingFilter",
    "JSONFormatter",
    "LazyLoggerAdapter",
    "clear_log_context",
    "configure_logging",
    "get_lazy_logger",
    "get_log_context",
    "set_log_context",
    "setup_logging",
]
