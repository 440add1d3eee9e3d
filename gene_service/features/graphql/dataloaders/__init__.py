"""Request-scoped loader container.

DataLoaders implements the gene loader contract on top of the catalogue
client. Gene lookups go through a batching DataLoader; relationship listings
are plain client calls since every call site asks for a distinct window.

Each GraphQL request gets its own instance so caches never leak between
requests.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from gene_service.features.graphql.dataloaders.genes import GeneDataLoader

if TYPE_CHECKING:
    from gene_service.features.genes.loaders import UpstreamResponse
    from gene_service.infra.external import CatalogClient


@dataclass
class DataLoaders:
    """Container for all request loaders.

    Usage in resolver:
        ctx = info.context
        gene = await ctx.loaders.gene("abstract-painting")
    """

    client: CatalogClient
    genes: GeneDataLoader

    async def gene(self, gene_id: str) -> Mapping[str, Any]:
        return await self.genes.load(gene_id)

    async def gene_artists(self, gene_id: str, params: Mapping[str, Any]) -> list[Mapping[str, Any]]:
        return await self.client.gene_artists(gene_id, params)

    async def filter_artworks(self, params: Mapping[str, Any]) -> Mapping[str, Any]:
        return await self.client.filter_artworks(params)

    async def similar_genes(self, gene_id: str, params: Mapping[str, Any]) -> UpstreamResponse:
        return await self.client.similar_genes(gene_id, params)

    async def trending_artists(self, params: Mapping[str, Any]) -> list[Mapping[str, Any]]:
        return await self.client.trending_artists(params)

    @property
    def followed_gene(self) -> Callable[[str], Awaitable[Mapping[str, Any]]] | None:
        """Follow-state loader, only available for user-scoped clients."""
        if not self.client.has_user:
            return None
        return self.client.followed_gene


def create_dataloaders(client: CatalogClient) -> DataLoaders:
    """Factory for creating request-scoped loaders.

    Args:
        client: Catalogue client shared by the application

    Returns:
        DataLoaders container with all loaders initialized
    """
    return DataLoaders(client=client, genes=GeneDataLoader(client))


__all__ = ["DataLoaders", "GeneDataLoader", "create_dataloaders"]
