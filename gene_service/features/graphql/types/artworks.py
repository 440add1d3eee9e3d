"""GraphQL types for a gene's filtered artworks.

The artworks connection carries two extension fields next to ``edges`` and
``pageInfo``: ``aggregations`` (the backend's aggregation payload, exposed
as opaque JSON) and ``counts``.
"""

from __future__ import annotations

from typing import Any

import strawberry
from strawberry.scalars import JSON

from gene_service.core.pagination import Connection
from gene_service.features.genes.schemas import ArtworkResponse
from gene_service.features.graphql.types.base import PageInfoType


@strawberry.type(name="Artwork", description="An artwork")
class ArtworkType:
    id: strawberry.ID = strawberry.field(description="Slug of the artwork")
    internal_id: strawberry.ID | None = strawberry.field(
        name="internalID", default=None, description="Internal identifier"
    )
    title: str | None = None
    date: str | None = None
    medium: str | None = None
    category: str | None = None

    @classmethod
    def from_response(cls, artwork: ArtworkResponse) -> ArtworkType:
        return cls(
            id=strawberry.ID(artwork.id),
            internal_id=strawberry.ID(artwork.internal_id) if artwork.internal_id else None,
            title=artwork.title,
            date=artwork.date,
            medium=artwork.medium,
            category=artwork.category,
        )


@strawberry.type(name="FilterArtworksCounts", description="Counts for a filtered artwork listing")
class FilterArtworksCounts:
    total: int = strawberry.field(description="Total number of matching artworks")


@strawberry.type(name="GeneArtworksEdge", description="Edge containing an Artwork node and cursor")
class GeneArtworksEdge:
    node: ArtworkType = strawberry.field(description="The artwork")
    cursor: str = strawberry.field(description="Opaque cursor for this edge")


@strawberry.type(
    name="GeneArtworksConnection",
    description="Relay connection of a gene's artworks with aggregations",
)
class GeneArtworksConnection:
    edges: list[GeneArtworksEdge] = strawberry.field(description="List of edges")
    page_info: PageInfoType = strawberry.field(description="Pagination information")
    aggregations: JSON = strawberry.field(
        default_factory=dict, description="Aggregations keyed by aggregation name"
    )
    counts: FilterArtworksCounts | None = strawberry.field(
        default=None, description="Counts for the whole listing"
    )

    @classmethod
    def from_connection(cls, connection: Connection[ArtworkResponse]) -> GeneArtworksConnection:
        extensions: dict[str, Any] = connection.extensions
        counts = extensions.get("counts")
        return cls(
            edges=[
                GeneArtworksEdge(node=ArtworkType.from_response(edge.node), cursor=edge.cursor)
                for edge in connection.edges
            ],
            page_info=PageInfoType.from_page_info(connection.page_info),
            aggregations=extensions.get("aggregations") or {},
            counts=FilterArtworksCounts(total=counts["total"]) if counts else None,
        )


__all__ = [
    "ArtworkType",
    "FilterArtworksCounts",
    "GeneArtworksConnection",
    "GeneArtworksEdge",
]
