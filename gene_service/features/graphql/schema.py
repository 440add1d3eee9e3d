"""GraphQL schema assembly.

Builds the schema from the gene query root. Type references between
modules are resolved here, once every type has been imported.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import strawberry

from gene_service.features.graphql.error_handler import log_error
from gene_service.features.graphql.extensions import get_extensions
from gene_service.features.graphql.resolvers import GeneQuery

if TYPE_CHECKING:
    from graphql import GraphQLError
    from strawberry.types import ExecutionContext

logger = logging.getLogger(__name__)


@strawberry.type
class Query(GeneQuery):
    """Root query type."""


class GeneSchema(strawberry.Schema):
    """Schema that logs errors through the application's error classifier."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            log_error(error, execution_context)


def create_schema() -> GeneSchema:
    """Create the schema with the configured extensions."""
    return GeneSchema(query=Query, extensions=get_extensions())


schema = create_schema()

logger.info("GraphQL schema created successfully")

__all__ = ["GeneSchema", "Query", "create_schema", "schema"]
