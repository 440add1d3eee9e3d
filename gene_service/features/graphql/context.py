"""GraphQL context for request-scoped dependencies.

The context is created fresh for each GraphQL request and provides:
- Loaders (batching and caching scoped to the request)
- The gene service built on those loaders
- Correlation ID (for log correlation)

Following Strawberry's FastAPI integration pattern:
https://strawberry.rocks/docs/integrations/fastapi#context_getter
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from strawberry.fastapi import BaseContext

from gene_service.features.genes.service import GeneService

if TYPE_CHECKING:
    from starlette.background import BackgroundTasks
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.websockets import WebSocket

    from gene_service.features.genes.loaders import GeneLoaders


@dataclass
class GraphQLContext(BaseContext):
    """Request context for GraphQL operations.

    Example usage in resolver:
        @strawberry.field
        async def gene(self, info: Info[GraphQLContext, None], id: str) -> GeneType:
            view = await info.context.genes.gene_view(id)
            return GeneType(view=view)
    """

    request: Request | WebSocket | None = None
    response: Response | None = None
    background_tasks: BackgroundTasks | None = None

    loaders: GeneLoaders = field(default=None)  # type: ignore[assignment]
    correlation_id: str | None = None
    _genes: GeneService | None = field(default=None, init=False, repr=False)

    @property
    def genes(self) -> GeneService:
        """Gene service bound to this request's loaders."""
        if self._genes is None:
            self._genes = GeneService(self.loaders)
        return self._genes


__all__ = ["GraphQLContext"]
