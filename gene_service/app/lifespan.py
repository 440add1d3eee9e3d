"""Application lifespan management.

Startup Order:
1. Logging
2. Catalogue client (shared by every GraphQL request)

Shutdown Order: Reverse of startup
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from gene_service.core.settings import get_app_settings, get_logging_settings
from gene_service.infra.external import CatalogClient
from gene_service.infra.logging import setup_logging

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Start and stop application services."""
    settings = get_app_settings()
    setup_logging(
        log_settings=get_logging_settings(), force=True, service_name=settings.service_name
    )
    logger.info(
        "Application starting",
        extra={"service": settings.service_name, "environment": settings.environment},
    )

    client = CatalogClient.from_settings()
    app.state.catalog_client = client
    try:
        yield
    finally:
        await client.close()
        logger.info("Application stopped", extra={"service": settings.service_name})
