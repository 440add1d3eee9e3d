"""Service layer for gene relationships.

Drives each paginated relationship of a gene through the same steps:
translate arguments, derive the offset window, call one loader, rebuild the
connection and attach side-channel data. The service knows nothing about
GraphQL; resolvers hand it plain argument mappings.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from gene_service.core.exceptions import InvalidPaginationArgumentException
from gene_service.core.pagination import (
    Connection,
    FromBody,
    FromHeader,
    FromValue,
    connection_args_from,
    connection_from_array_slice,
    merge_side_channel,
    resolve_total,
)
from gene_service.core.settings import get_catalog_settings, get_pagination_settings
from gene_service.features.genes.arguments import (
    translate_artist_args,
    translate_filter_args,
    translate_similar_args,
)
from gene_service.features.genes.demand import requires_fetch
from gene_service.features.genes.sampling import sample_items
from gene_service.features.genes.schemas import (
    ArtistResponse,
    ArtworkResponse,
    FullGene,
    GeneResponse,
    GeneStub,
    GeneView,
)
from gene_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from gene_service.core.settings import PaginationSettings
    from gene_service.features.genes.loaders import GeneLoaders

logger = logging.getLogger(__name__)
lazy_logger = get_lazy_logger(__name__)

SUBJECT_MATTER_MATCHES = (
    "content",
    "medium",
    "concrete contemporary",
    "abstract contemporary",
    "concept",
    "technique",
    "appearance genes",
)
SUBJECT_MATTER_PATTERN = re.compile("|".join(SUBJECT_MATTER_MATCHES), re.IGNORECASE)

ARTWORK_TOTAL = FromBody(("aggregations", "total", "value"))

# Fields a gene can answer without loading it. ``internalID`` is absent
# because it cannot be derived from the slug.
GENE_CHEAP_FIELDS = frozenset({"id", "href", "artworks", "similar", "trendingArtists"})


def gene_mode(gene: GeneResponse) -> str:
    """``"artworks"`` for subject-matter gene families, ``"artist"`` otherwise."""
    family = gene.type.name if gene.type else None
    if family and SUBJECT_MATTER_PATTERN.search(family):
        return "artworks"
    return "artist"


def gene_href(gene_id: str) -> str:
    """Public path of a gene."""
    return f"/gene/{gene_id}"


class GeneService:
    """Resolve gene data and gene relationships through request loaders.

    Handles:
    - Gene lookups, skipped when only cheap fields are requested
    - Artist, artwork and similar-gene connections
    - Sampled trending artists
    - Follow state of the current user
    """

    def __init__(
        self,
        loaders: GeneLoaders,
        pagination: PaginationSettings | None = None,
        total_count_header: str | None = None,
    ) -> None:
        """Initialize the gene service.

        Args:
            loaders: Request-scoped loaders
            pagination: Page size settings (defaults to environment settings)
            total_count_header: Header carrying similar-gene totals
        """
        self._loaders = loaders
        self._pagination = pagination or get_pagination_settings()
        self._total_header = total_count_header or get_catalog_settings().total_count_header

    @property
    def _page_limits(self) -> dict[str, int]:
        return {
            "default_limit": self._pagination.default_limit,
            "max_limit": self._pagination.max_limit,
        }

    async def gene_view(self, gene_id: str, *, fetch: bool = True) -> GeneView:
        """Load a gene, or return a stub when no gene data is needed."""
        if not fetch:
            logger.debug("Skipping gene fetch", extra={"gene_id": gene_id})
            return GeneStub(id=gene_id)
        payload = await self._loaders.gene(gene_id)
        return FullGene(GeneResponse.model_validate(payload))

    async def load_gene(
        self,
        gene_id: str,
        requested_fields: Iterable[str],
        cheap_fields: Iterable[str] = GENE_CHEAP_FIELDS,
    ) -> GeneView:
        """Load a gene only if the requested fields need more than cheap ones."""
        return await self.gene_view(gene_id, fetch=requires_fetch(requested_fields, cheap_fields))

    async def _full_gene(self, view: GeneView) -> GeneResponse:
        match view:
            case FullGene(gene=gene):
                return gene
            case GeneStub(id=gene_id):
                payload = await self._loaders.gene(gene_id)
                return GeneResponse.model_validate(payload)

    async def artists(self, view: GeneView, args: Mapping[str, Any]) -> Connection[ArtistResponse]:
        """Artists of a gene, paged against the gene's artist count."""
        gene = await self._full_gene(view)
        params = translate_artist_args(args, **self._page_limits)
        lazy_logger.debug(lambda: f"gene_artists params for {gene.id}: {params}")

        hits = await self._loaders.gene_artists(gene.id, params)
        return connection_from_array_slice(
            [ArtistResponse.model_validate(hit) for hit in hits],
            connection_args_from(args),
            slice_start=params["offset"],
            array_length=resolve_total(FromValue(gene.counts.artists)),
        )

    async def artworks(self, gene_id: str, args: Mapping[str, Any]) -> Connection[ArtworkResponse]:
        """Filtered artworks of a gene with aggregations and counts attached."""
        params = translate_filter_args(args, gene_id=gene_id, **self._page_limits)
        lazy_logger.debug(lambda: f"filter_artworks params for {gene_id}: {params}")

        response = await self._loaders.filter_artworks(params)
        aggregations = dict(response.get("aggregations") or {})
        total = resolve_total(ARTWORK_TOTAL, body=response)

        connection = connection_from_array_slice(
            [ArtworkResponse.model_validate(hit) for hit in response.get("hits") or []],
            connection_args_from(args),
            slice_start=params["offset"],
            array_length=total,
        )
        return merge_side_channel(
            connection,
            {"aggregations": aggregations, "counts": {"total": total}},
        )

    async def similar(
        self,
        gene_id: str,
        args: Mapping[str, Any],
        exclude_gene_ids: list[str] | None = None,
    ) -> Connection[GeneResponse]:
        """Genes similar to a gene; the total comes from a response header."""
        params = translate_similar_args(
            args, exclude_gene_ids=exclude_gene_ids, **self._page_limits
        )
        response = await self._loaders.similar_genes(gene_id, params)
        total = resolve_total(FromHeader(self._total_header), headers=response.headers)

        return connection_from_array_slice(
            [GeneResponse.model_validate(gene) for gene in response.body or []],
            connection_args_from(args),
            slice_start=params["offset"],
            array_length=total,
        )

    async def trending_artists(self, gene_id: str, sample: int | None = None) -> list[ArtistResponse]:
        """Trending artists for a gene, optionally randomly sampled."""
        if sample is not None and sample > self._pagination.trending_sample_max:
            raise InvalidPaginationArgumentException(
                "sample", sample, f"must not be greater than {self._pagination.trending_sample_max}"
            )
        artists = await self._loaders.trending_artists({"gene": gene_id})
        return [ArtistResponse.model_validate(artist) for artist in sample_items(artists, sample)]

    async def is_followed(self, gene_id: str) -> bool:
        """Whether the current user follows the gene; False without a user."""
        followed_gene = getattr(self._loaders, "followed_gene", None)
        if followed_gene is None:
            return False
        response = await followed_gene(gene_id)
        return bool(response.get("is_followed"))


__all__ = [
    "GENE_CHEAP_FIELDS",
    "SUBJECT_MATTER_MATCHES",
    "GeneService",
    "gene_href",
    "gene_mode",
]
