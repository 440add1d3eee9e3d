"""Pytest configuration and shared fixtures.

Organization:
    - Environment: settings that keep tests away from real services
    - Settings: cache reset between tests
    - Loaders: an in-memory stand-in for the catalogue backend
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from typing import Any
from unittest.mock import AsyncMock

import pytest

# Ensure tests run without external infrastructure
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("CATALOG_BASE_URL", "http://catalog.test/api/v1")
os.environ.setdefault("CATALOG_MAX_RETRIES", "1")
os.environ.setdefault("LOG_JSON", "false")

from gene_service.core.settings import clear_all_settings_caches  # noqa: E402
from gene_service.features.genes.loaders import UpstreamResponse  # noqa: E402


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _reset_settings_caches() -> Iterator[None]:
    """Reload settings for every test so monkeypatched env vars apply."""
    clear_all_settings_caches()
    yield
    clear_all_settings_caches()


# ============================================================================
# Loader Fixtures
# ============================================================================


ABSTRACT_PAINTING: dict[str, Any] = {
    "id": "abstract-painting",
    "_id": "4d90d18edcdd5f44a5000010",
    "name": "Abstract Painting",
    "display_name": "Abstract Painting (Genre)",
    "description": "Painting that does not depict recognizable subjects.",
    "published": True,
    "browseable": True,
    "type": {"name": "Styles and Movements"},
    "counts": {"artists": 3, "artworks": 250},
    "image_url": "https://images.example/abstract-painting/:version.jpg",
    "image_versions": ["square", "thumb"],
}


def make_hits(prefix: str, start: int, count: int) -> list[dict[str, Any]]:
    """Backend hits ``<prefix>-<start>`` .. ``<prefix>-<start + count - 1>``."""
    return [
        {"id": f"{prefix}-{index}", "_id": f"{prefix}-internal-{index}", "name": f"{prefix} {index}"}
        for index in range(start, start + count)
    ]


class FakeLoaders:
    """In-memory catalogue backend with AsyncMock call recording."""

    def __init__(
        self,
        genes: Mapping[str, Mapping[str, Any]] | None = None,
        *,
        artworks: Mapping[str, Any] | None = None,
        similar: UpstreamResponse | None = None,
        trending: list[Mapping[str, Any]] | None = None,
    ) -> None:
        genes = dict(genes or {ABSTRACT_PAINTING["id"]: ABSTRACT_PAINTING})

        async def load_gene(gene_id: str) -> Mapping[str, Any]:
            return genes[gene_id]

        self.gene = AsyncMock(side_effect=load_gene)
        self.gene_artists = AsyncMock(return_value=make_hits("artist", 0, 2))
        self.filter_artworks = AsyncMock(
            return_value=artworks
            or {
                "hits": make_hits("artwork", 0, 2),
                "aggregations": {"total": {"value": 5}},
            }
        )
        self.similar_genes = AsyncMock(
            return_value=similar
            or UpstreamResponse(body=make_hits("gene", 0, 2), headers={"X-Total-Count": "2"})
        )
        self.trending_artists = AsyncMock(return_value=trending or make_hits("artist", 0, 4))


@pytest.fixture
def gene_payload() -> dict[str, Any]:
    """A complete gene payload as the catalogue returns it."""
    return dict(ABSTRACT_PAINTING)


@pytest.fixture
def fake_loaders() -> FakeLoaders:
    """Loaders backed by in-memory data."""
    return FakeLoaders()
