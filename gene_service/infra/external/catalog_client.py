"""HTTP client for the offset-based catalogue API.

Implements the gene loader contract on top of the catalogue REST endpoints.
List parameters are sent as repeated ``key[]`` query parameters, which is
how the catalogue API reads arrays.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from gene_service.core.settings import CatalogSettings, get_catalog_settings
from gene_service.features.genes.loaders import UpstreamResponse
from gene_service.infra.external.base_client import BaseHTTPClient

logger = logging.getLogger(__name__)


def encode_query(params: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Flatten parameters into query pairs the catalogue API understands.

    Booleans become ``true``/``false``, lists become repeated ``key[]``
    pairs and ``None`` values are dropped.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            pairs.extend((f"{key}[]", _scalar(item)) for item in value)
        else:
            pairs.append((key, _scalar(value)))
    return pairs


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class CatalogClient(BaseHTTPClient):
    """Catalogue API client.

    Usage:
        async with CatalogClient.from_settings() as client:
            gene = await client.gene("abstract-painting")
    """

    def __init__(
        self,
        settings: CatalogSettings | None = None,
        *,
        access_token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the catalogue client.

        Args:
            settings: Client settings (defaults to environment settings)
            access_token: User token; enables user-scoped endpoints
            transport: Optional httpx transport
        """
        settings = settings or get_catalog_settings()
        headers: dict[str, str] = {"Accept": "application/json"}
        if settings.app_token is not None:
            headers["X-XAPP-TOKEN"] = settings.app_token.get_secret_value()
        if access_token:
            headers["X-ACCESS-TOKEN"] = access_token

        super().__init__(
            base_url=settings.base_url,
            timeout=settings.timeout,
            max_retries=settings.max_retries,
            headers=headers,
            transport=transport,
        )
        self.has_user = access_token is not None

    @classmethod
    def from_settings(cls, access_token: str | None = None) -> CatalogClient:
        """Create a client from environment settings."""
        return cls(get_catalog_settings(), access_token=access_token)

    async def gene(self, gene_id: str) -> Mapping[str, Any]:
        return await self.get_json(f"/gene/{gene_id}")

    async def genes(self, gene_ids: list[str]) -> list[Mapping[str, Any]]:
        """Batch lookup used by the gene DataLoader."""
        return await self.get_json("/genes", params=encode_query({"id": gene_ids}))

    async def gene_artists(self, gene_id: str, params: Mapping[str, Any]) -> list[Mapping[str, Any]]:
        return await self.get_json(f"/gene/{gene_id}/artists", params=encode_query(params))

    async def filter_artworks(self, params: Mapping[str, Any]) -> Mapping[str, Any]:
        return await self.get_json("/filter/artworks", params=encode_query(params))

    async def similar_genes(self, gene_id: str, params: Mapping[str, Any]) -> UpstreamResponse:
        query = encode_query({"gene": [gene_id], **params})
        response = await self.request("GET", "/related/genes", params=query)
        return UpstreamResponse(body=response.json(), headers=dict(response.headers))

    async def trending_artists(self, params: Mapping[str, Any]) -> list[Mapping[str, Any]]:
        return await self.get_json("/artists/trending", params=encode_query(params))

    async def followed_gene(self, gene_id: str) -> Mapping[str, Any]:
        """Follow state of a gene for the token's user."""
        follows = await self.get_json("/me/follow/genes", params=encode_query({"genes": [gene_id]}))
        return {"is_followed": bool(follows)}


__all__ = ["CatalogClient", "encode_query"]
