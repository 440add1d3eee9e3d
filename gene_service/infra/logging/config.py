"""Logging configuration setup.

Builds a dictConfig with:
- JSONL output (Loki-ready) or a plain console format
- ContextInjectingFilter for automatic context propagation
- All handlers on the root logger (child loggers propagate)
"""

from __future__ import annotations

import logging
import logging.config
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gene_service.core.settings.logs import LoggingSettings

logger = logging.getLogger(__name__)
_LOGGING_INITIALIZED = False


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    force: bool = False,
    **configure_kwargs: Any,
) -> None:
    """Ensure logging is configured once across entrypoints.

    Args:
        log_settings: Optional logging settings instance. If omitted, settings
            are loaded via get_logging_settings().
        force: Reconfigure logging even if it was already initialized.
        **configure_kwargs: Explicit overrides for configure_logging().
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    if log_settings is None:
        from gene_service.core.settings import get_logging_settings

        log_settings = get_logging_settings()

    log_config = {**log_settings.to_logging_kwargs(), **configure_kwargs}
    configure_logging(**log_config)
    _LOGGING_INITIALIZED = True


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = True,
    console_enabled: bool = True,
    include_context: bool = True,
    service_name: str | None = None,
) -> None:
    """Configure root logging with dictConfig.

    Args:
        log_level: Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_logs: Emit JSON Lines instead of plain text.
        console_enabled: Attach a stderr handler.
        include_context: Add ContextInjectingFilter to handlers.
        service_name: Static ``service`` field added to JSON records.

    Example:
        configure_logging(log_level="DEBUG", json_logs=False)
    """
    formatter: dict[str, Any]
    if json_logs:
        formatter = {
            "()": "gene_service.infra.logging.formatters.JSONFormatter",
            "static": {"service": service_name} if service_name else None,
        }
    else:
        formatter = {
            "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        }

    filters: dict[str, Any] = {}
    handler_filters: list[str] = []
    if include_context:
        filters["context"] = {
            "()": "gene_service.infra.logging.context.ContextInjectingFilter",
        }
        handler_filters.append("context")

    handlers: dict[str, Any] = {}
    if console_enabled:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "filters": handler_filters,
            "stream": "ext://sys.stderr",
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": formatter},
            "filters": filters,
            "handlers": handlers,
            "root": {"level": log_level.upper(), "handlers": list(handlers)},
            "loggers": {
                "httpx": {"level": "WARNING"},
                "httpcore": {"level": "WARNING"},
            },
        }
    )
    logger.debug("Logging configured", extra={"json_logs": json_logs, "level": log_level})


__all__ = ["configure_logging", "setup_logging"]
