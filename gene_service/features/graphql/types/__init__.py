"""GraphQL types for genes and their relationships."""

from __future__ import annotations

from gene_service.features.graphql.types.artists import ArtistConnection, ArtistEdge, ArtistType
from gene_service.features.graphql.types.artworks import (
    ArtworkType,
    FilterArtworksCounts,
    GeneArtworksConnection,
    GeneArtworksEdge,
)
from gene_service.features.graphql.types.base import PageInfoType
from gene_service.features.graphql.types.genes import GeneConnection, GeneEdge, GeneType
from gene_service.features.graphql.types.images import ImageType

__all__ = [
    "ArtistConnection",
    "ArtistEdge",
    "ArtistType",
    "ArtworkType",
    "FilterArtworksCounts",
    "GeneArtworksConnection",
    "GeneArtworksEdge",
    "GeneConnection",
    "GeneEdge",
    "GeneType",
    "ImageType",
    "PageInfoType",
]
