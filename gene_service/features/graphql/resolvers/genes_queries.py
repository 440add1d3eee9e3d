"""Query resolvers for genes.

Provides:
- gene(id): Get a single gene by slug or ID

The gene itself is only loaded when the selection asks for something beyond
the fields answerable from the slug.
"""

from __future__ import annotations

import logging

import strawberry
from strawberry.types import Info

from gene_service.features.graphql.context import GraphQLContext
from gene_service.features.graphql.demand import requested_field_names
from gene_service.features.graphql.types.genes import GeneType

logger = logging.getLogger(__name__)


async def gene_query(info: Info[GraphQLContext, None], id: str) -> GeneType:
    """Get a single gene by slug or ID.

    Args:
        info: Strawberry info with context
        id: The slug or ID of the gene

    Returns:
        GeneType backed by the loaded gene, or by a stub when the selection
        only needs cheap fields
    """
    requested = requested_field_names(info)
    logger.debug("Resolving gene", extra={"gene_id": id, "fields": sorted(requested)})
    view = await info.context.genes.load_gene(id, requested)
    return GeneType(view=view)


@strawberry.type
class GeneQuery:
    """Gene root fields."""

    gene: GeneType = strawberry.field(
        resolver=gene_query, description="Get a single gene by slug or ID"
    )


__all__ = ["GeneQuery", "gene_query"]
