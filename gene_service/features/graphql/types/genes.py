"""GraphQL types for genes.

Types are declared in two phases. Every node and connection type below is
a plain Strawberry type; fields refer to other types by name (including
``GeneConnection`` from within ``GeneType``) and Strawberry resolves the
references when the schema is built, after all types exist.

A gene is backed by a GeneView: either the full backend payload or a stub
holding only the requested id (see GeneService.gene_view). Fields that need
gene data return null for a stub.
"""

from __future__ import annotations

from typing import Annotated

import strawberry
from strawberry.types import Info

from gene_service.core.pagination import Connection
from gene_service.features.genes.schemas import FullGene, GeneResponse, GeneStub, GeneView
from gene_service.features.genes.service import gene_href, gene_mode
from gene_service.features.graphql.arguments import (
    AfterArg,
    BeforeArg,
    FirstArg,
    LastArg,
    graphql_arguments,
)
from gene_service.features.graphql.context import GraphQLContext
from gene_service.features.graphql.types.artists import ArtistConnection, ArtistType
from gene_service.features.graphql.types.artworks import GeneArtworksConnection
from gene_service.features.graphql.types.base import PageInfoType
from gene_service.features.graphql.types.images import ImageType

ListArg = Annotated[list[str] | None, strawberry.argument(description="List filter")]


def _gene(view: GeneView) -> GeneResponse | None:
    match view:
        case FullGene(gene=gene):
            return gene
        case GeneStub():
            return None


@strawberry.type(name="Gene", description="A gene: a category artists and artworks are tagged with")
class GeneType:
    view: strawberry.Private[GeneView]

    @strawberry.field(description="Slug of the gene")
    def id(self) -> strawberry.ID:
        return strawberry.ID(self.view.id)

    @strawberry.field(name="internalID", description="Internal identifier of the gene")
    def internal_id(self) -> strawberry.ID | None:
        gene = _gene(self.view)
        if gene is None or gene.internal_id is None:
            return None
        return strawberry.ID(gene.internal_id)

    @strawberry.field(description="Slug of the gene as stored by the catalogue")
    def slug(self) -> str | None:
        gene = _gene(self.view)
        return gene.id if gene else None

    @strawberry.field
    def name(self) -> str | None:
        gene = _gene(self.view)
        return gene.name if gene else None

    @strawberry.field
    def display_name(self) -> str | None:
        gene = _gene(self.view)
        return gene.display_name if gene else None

    @strawberry.field
    def description(self) -> str | None:
        gene = _gene(self.view)
        return gene.description if gene else None

    @strawberry.field
    def image(self) -> ImageType | None:
        gene = _gene(self.view)
        return ImageType.from_template(gene.image_url, gene.image_versions) if gene else None

    @strawberry.field(description="Public path of the gene")
    def href(self) -> str:
        return gene_href(self.view.id)

    @strawberry.field
    def is_published(self) -> bool | None:
        gene = _gene(self.view)
        return gene.published if gene else None

    @strawberry.field(description="Whether artworks or artists are the primary listing")
    def mode(self) -> str | None:
        gene = _gene(self.view)
        return gene_mode(gene) if gene else None

    @strawberry.field(description="Whether the current user follows this gene")
    async def is_followed(self, info: Info[GraphQLContext, None]) -> bool:
        return await info.context.genes.is_followed(self.view.id)

    @strawberry.field(description="Artists tagged with this gene")
    async def artists(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> ArtistConnection:
        connection = await info.context.genes.artists(self.view, graphql_arguments(info))
        return ArtistConnection.from_connection(connection)

    @strawberry.field(description="Artworks tagged with this gene")
    async def artworks(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
        aggregations: ListArg = None,
        medium: Annotated[
            str | None, strawberry.argument(description='A medium slug, or "*" for all mediums')
        ] = None,
        sort: str | None = None,
        keyword: str | None = None,
        color: str | None = None,
        aggregation_partner_cities: Annotated[
            list[str] | None, strawberry.argument(name="aggregationPartnerCities")
        ] = None,
        artist_id: Annotated[str | None, strawberry.argument(name="artistID")] = None,
        artist_ids: Annotated[list[str] | None, strawberry.argument(name="artistIDs")] = None,
        at_auction: bool | None = None,
        attribution_class: ListArg = None,
        dimension_range: str | None = None,
        extra_aggregation_gene_ids: Annotated[
            list[str] | None, strawberry.argument(name="extraAggregationGeneIDs")
        ] = None,
        include_artworks_by_followed_artists: bool | None = None,
        include_medium_filter_in_aggregation: bool | None = None,
        inquireable_only: bool | None = None,
        for_sale: bool | None = None,
        gene_id: Annotated[str | None, strawberry.argument(name="geneID")] = None,
        gene_ids: Annotated[list[str] | None, strawberry.argument(name="geneIDs")] = None,
        major_periods: ListArg = None,
        partner_id: Annotated[str | None, strawberry.argument(name="partnerID")] = None,
        partner_cities: ListArg = None,
        price_range: str | None = None,
        sale_id: Annotated[str | None, strawberry.argument(name="saleID")] = None,
        tag_id: Annotated[str | None, strawberry.argument(name="tagID")] = None,
        keyword_match_exact: bool | None = None,
    ) -> GeneArtworksConnection:
        # Filters are forwarded by their GraphQL names; the gene id always wins.
        connection = await info.context.genes.artworks(self.view.id, graphql_arguments(info))
        return GeneArtworksConnection.from_connection(connection)

    @strawberry.field(description="A list of genes similar to the specified gene")
    async def similar(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
        exclude_gene_ids: Annotated[
            list[str] | None,
            strawberry.argument(
                name="excludeGeneIDs",
                description="Gene ids (not slugs) to exclude; may exclude every gene",
            ),
        ] = None,
    ) -> GeneConnection:
        connection = await info.context.genes.similar(
            self.view.id, graphql_arguments(info), exclude_gene_ids
        )
        return GeneConnection.from_connection(connection)

    @strawberry.field(description="Trending artists for this gene")
    async def trending_artists(
        self,
        info: Info[GraphQLContext, None],
        sample: Annotated[
            int | None, strawberry.argument(description="Randomly pick this many artists")
        ] = None,
    ) -> list[ArtistType]:
        artists = await info.context.genes.trending_artists(self.view.id, sample)
        return [ArtistType.from_response(artist) for artist in artists]


@strawberry.type(name="GeneEdge", description="Edge containing a Gene node and cursor")
class GeneEdge:
    node: GeneType = strawberry.field(description="The gene")
    cursor: str = strawberry.field(description="Opaque cursor for this edge")


@strawberry.type(name="GeneConnection", description="Relay connection of genes")
class GeneConnection:
    edges: list[GeneEdge] = strawberry.field(description="List of edges")
    page_info: PageInfoType = strawberry.field(description="Pagination information")

    @classmethod
    def from_connection(cls, connection: Connection[GeneResponse]) -> GeneConnection:
        return cls(
            edges=[
                GeneEdge(node=GeneType(view=FullGene(edge.node)), cursor=edge.cursor)
                for edge in connection.edges
            ],
            page_info=PageInfoType.from_page_info(connection.page_info),
        )


__all__ = ["GeneConnection", "GeneEdge", "GeneType"]
