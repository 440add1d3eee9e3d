"""Loader contract consumed by the gene service.

Loaders are the only way the service reaches the catalogue backend. Each
call site expects a specific result shape:

- plain list: ``gene_artists``, ``trending_artists``
- ``{"aggregations": ..., "hits": [...]}``: ``filter_artworks``
- UpstreamResponse(body, headers): ``similar_genes`` (total in a header)

A ``followed_gene`` loader may also be present for requests made on behalf
of a user; the service treats its absence as "not followed".

Implementations may batch or cache within a request; the service never
relies on it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class UpstreamResponse:
    """A response body together with its headers."""

    body: Any
    headers: Mapping[str, str] = field(default_factory=dict)


class GeneLoaders(Protocol):
    """Request-scoped loaders for gene relationships."""

    async def gene(self, gene_id: str) -> Mapping[str, Any]:
        """Load a gene by slug or id."""
        ...

    async def gene_artists(self, gene_id: str, params: Mapping[str, Any]) -> list[Mapping[str, Any]]:
        """Load a window of artists for a gene."""
        ...

    async def filter_artworks(self, params: Mapping[str, Any]) -> Mapping[str, Any]:
        """Load filtered artworks with aggregations."""
        ...

    async def similar_genes(self, gene_id: str, params: Mapping[str, Any]) -> UpstreamResponse:
        """Load genes related to a gene; the total is in a response header."""
        ...

    async def trending_artists(self, params: Mapping[str, Any]) -> list[Mapping[str, Any]]:
        """Load trending artists."""
        ...


__all__ = ["GeneLoaders", "UpstreamResponse"]
