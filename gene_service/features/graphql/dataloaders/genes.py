"""DataLoader for batch-loading genes.

Sibling fields that resolve the same gene (or several genes in one query)
share a single backend round trip per event loop tick.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from strawberry.dataloader import DataLoader

from gene_service.core.exceptions import NotFoundException

if TYPE_CHECKING:
    from gene_service.infra.external import CatalogClient


class GeneDataLoader:
    """DataLoader for loading genes by slug or id.

    Each request gets its own loader instance for proper caching.

    Usage:
        loader = GeneDataLoader(client)
        gene = await loader.load("abstract-painting")
    """

    def __init__(self, client: CatalogClient) -> None:
        """Initialize with a catalogue client.

        Args:
            client: Client used for the batched lookups
        """
        self._client = client
        self._loader: DataLoader[str, Mapping[str, Any]] = DataLoader(load_fn=self._batch_load_genes)

    async def _batch_load_genes(self, ids: list[str]) -> list[Mapping[str, Any] | Exception]:
        """Batch load genes by slug or id.

        A single key uses the direct lookup, which accepts slugs and ids
        alike; several keys use the batch endpoint. Keys missing from the
        batch response resolve to NotFoundException.
        """
        if len(ids) == 1:
            return [await self._client.gene(ids[0])]

        genes = await self._client.genes(ids)
        by_key: dict[str, Mapping[str, Any]] = {}
        for gene in genes:
            for key in (gene.get("id"), gene.get("_id")):
                if key:
                    by_key[key] = gene

        return [
            by_key.get(id_)
            or NotFoundException(
                detail=f"Gene {id_} not found", type="gene-not-found", extra={"gene_id": id_}
            )
            for id_ in ids
        ]

    async def load(self, id_: str) -> Mapping[str, Any]:
        """Load a single gene; batched with other loads in the same tick."""
        return await self._loader.load(id_)


__all__ = ["GeneDataLoader"]
