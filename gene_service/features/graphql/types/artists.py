"""GraphQL types for artists listed under a gene."""

from __future__ import annotations

import strawberry

from gene_service.core.pagination import Connection
from gene_service.features.genes.schemas import ArtistResponse
from gene_service.features.graphql.types.base import PageInfoType


@strawberry.type(name="Artist", description="An artist")
class ArtistType:
    id: strawberry.ID = strawberry.field(description="Slug of the artist")
    internal_id: strawberry.ID | None = strawberry.field(
        name="internalID", default=None, description="Internal identifier"
    )
    name: str | None = None
    nationality: str | None = None
    birthday: str | None = None

    @classmethod
    def from_response(cls, artist: ArtistResponse) -> ArtistType:
        return cls(
            id=strawberry.ID(artist.id),
            internal_id=strawberry.ID(artist.internal_id) if artist.internal_id else None,
            name=artist.name,
            nationality=artist.nationality,
            birthday=artist.birthday,
        )


@strawberry.type(name="ArtistEdge", description="Edge containing an Artist node and cursor")
class ArtistEdge:
    node: ArtistType = strawberry.field(description="The artist")
    cursor: str = strawberry.field(description="Opaque cursor for this edge")


@strawberry.type(name="ArtistConnection", description="Relay connection of artists")
class ArtistConnection:
    edges: list[ArtistEdge] = strawberry.field(description="List of edges")
    page_info: PageInfoType = strawberry.field(description="Pagination information")

    @classmethod
    def from_connection(cls, connection: Connection[ArtistResponse]) -> ArtistConnection:
        return cls(
            edges=[
                ArtistEdge(node=ArtistType.from_response(edge.node), cursor=edge.cursor)
                for edge in connection.edges
            ],
            page_info=PageInfoType.from_page_info(connection.page_info),
        )


__all__ = ["ArtistConnection", "ArtistEdge", "ArtistType"]
