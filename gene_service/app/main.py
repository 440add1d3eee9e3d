"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from gene_service.app.lifespan import lifespan
from gene_service.core.settings import get_app_settings, get_graphql_settings


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Settings are loaded once and cached via LRU cache.

    Returns:
        Configured FastAPI application instance.
    """
    app_settings = get_app_settings()

    app = FastAPI(
        title=app_settings.title,
        version=app_settings.version,
        debug=app_settings.debug,
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )

    graphql_settings = get_graphql_settings()
    if graphql_settings.enabled:
        from gene_service.features.graphql.router import create_graphql_router

        app.include_router(create_graphql_router(), tags=["graphql"])

    return app


# Application instance for uvicorn
app = create_app()
