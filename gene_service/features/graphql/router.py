"""GraphQL router for FastAPI integration.

Provides:
- GraphQL endpoint at GRAPHQL_PATH
- Optional GraphQL IDE
- Request context with a correlation id and request-scoped loaders
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, cast

from fastapi import APIRouter, BackgroundTasks, Request, Response
from strawberry.fastapi import GraphQLRouter

from gene_service.core.settings import get_graphql_settings
from gene_service.features.graphql.context import GraphQLContext
from gene_service.features.graphql.dataloaders import create_dataloaders
from gene_service.features.graphql.schema import schema
from gene_service.infra.external import CatalogClient
from gene_service.infra.logging import set_log_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Request-ID"
ACCESS_TOKEN_HEADER = "X-Access-Token"


def _catalog_client(request: Request, background_tasks: BackgroundTasks) -> CatalogClient:
    """Shared application client, or a user-scoped one when a token is sent.

    User-scoped clients live for one request and are closed afterwards.
    """
    access_token = request.headers.get(ACCESS_TOKEN_HEADER)
    if not access_token:
        return request.app.state.catalog_client

    client = CatalogClient.from_settings(access_token=access_token)
    background_tasks.add_task(client.close)
    return client


async def get_graphql_context(
    request: Request,
    response: Response,
    background_tasks: BackgroundTasks,
) -> GraphQLContext:
    """Create GraphQL context from FastAPI dependencies.

    Following Strawberry's FastAPI integration pattern, this provides
    the standard context fields (request, response, background_tasks)
    plus application-specific dependencies.

    Args:
        request: FastAPI request
        response: FastAPI response (for setting headers)
        background_tasks: FastAPI background tasks

    Returns:
        GraphQLContext for use in resolvers
    """
    correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
    set_log_context(correlation_id=correlation_id)
    response.headers[CORRELATION_HEADER] = correlation_id

    client = _catalog_client(request, background_tasks)
    return GraphQLContext(
        request=request,
        response=response,
        background_tasks=background_tasks,
        loaders=create_dataloaders(client),
        correlation_id=correlation_id,
    )


def create_graphql_router() -> APIRouter:
    """Create GraphQL router with settings-based configuration."""
    settings = get_graphql_settings()

    graphql_app = GraphQLRouter(
        schema,
        context_getter=cast("Any", get_graphql_context),
        graphql_ide=settings.graphql_ide or None,
        path=settings.path,
    )

    router = APIRouter()
    router.include_router(graphql_app)
    logger.debug("GraphQL router created", extra={"ide": settings.graphql_ide})
    return router


__all__ = ["create_graphql_router", "get_graphql_context"]
