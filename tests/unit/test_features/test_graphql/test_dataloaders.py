"""Tests for request-scoped gene loaders."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

from gene_service.core.exceptions import NotFoundException
from gene_service.features.graphql.dataloaders import create_dataloaders


def make_client(*, has_user: bool = False) -> MagicMock:
    client = MagicMock()
    client.has_user = has_user
    client.gene = AsyncMock(return_value={"id": "abstract-painting"})
    client.genes = AsyncMock(
        return_value=[
            {"id": "abstract-painting", "_id": "4d90"},
            {"id": "minimalism", "_id": "4e5e"},
        ]
    )
    client.followed_gene = AsyncMock(return_value={"is_followed": True})
    return client


async def test_single_key_uses_direct_lookup() -> None:
    client = make_client()
    loaders = create_dataloaders(client)

    assert await loaders.gene("abstract-painting") == {"id": "abstract-painting"}

    client.gene.assert_awaited_once_with("abstract-painting")
    client.genes.assert_not_called()


async def test_concurrent_keys_are_batched() -> None:
    client = make_client()
    loaders = create_dataloaders(client)

    first, second = await asyncio.gather(loaders.gene("abstract-painting"), loaders.gene("4e5e"))

    assert first["id"] == "abstract-painting"
    assert second["id"] == "minimalism"
    client.genes.assert_awaited_once_with(["abstract-painting", "4e5e"])


async def test_missing_keys_raise_not_found() -> None:
    client = make_client()
    loaders = create_dataloaders(client)

    results = await asyncio.gather(
        loaders.gene("abstract-painting"), loaders.gene("unknown"), return_exceptions=True
    )

    assert results[0]["id"] == "abstract-painting"
    assert isinstance(results[1], NotFoundException)


async def test_followed_gene_requires_user() -> None:
    assert create_dataloaders(make_client()).followed_gene is None

    loaders = create_dataloaders(make_client(has_user=True))
    assert loaders.followed_gene is not None
    assert await loaders.followed_gene("abstract-painting") == {"is_followed": True}

