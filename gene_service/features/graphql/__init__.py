"""GraphQL API for genes.

Exposes the ``gene`` query with its artist, artwork and similar-gene
connections. The FastAPI router is built by create_graphql_router().
"""

from __future__ import annotations

from gene_service.features.graphql.context import GraphQLContext
from gene_service.features.graphql.schema import schema

__all__ = ["GraphQLContext", "schema"]
