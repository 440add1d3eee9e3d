"""Catalogue payload schemas and gene views.

The catalogue backend answers in snake_case JSON with ``_id`` for internal
identifiers. These models validate what the GraphQL layer reads and ignore
everything else.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class GeneFamily(BaseModel):
    """The family (type) a gene belongs to."""

    name: str | None = None

    model_config = ConfigDict(extra="ignore")


class GeneCounts(BaseModel):
    """Precomputed relationship counts on a gene."""

    artists: int = Field(default=0, ge=0)
    artworks: int = Field(default=0, ge=0)

    model_config = ConfigDict(extra="ignore")


class GeneResponse(BaseModel):
    """A gene as returned by ``GET /gene/{id}``."""

    id: str = Field(description="Slug of the gene")
    internal_id: str | None = Field(default=None, alias="_id")
    name: str | None = None
    display_name: str | None = None
    description: str | None = None
    published: bool | None = None
    browseable: bool | None = None
    type: GeneFamily | None = None
    counts: GeneCounts = Field(default_factory=GeneCounts)
    image_url: str | None = Field(default=None, description="URL template with a :version placeholder")
    image_versions: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ArtistResponse(BaseModel):
    """An artist listed under a gene."""

    id: str
    internal_id: str | None = Field(default=None, alias="_id")
    name: str | None = None
    nationality: str | None = None
    birthday: str | None = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ArtworkResponse(BaseModel):
    """An artwork hit from the filter endpoint."""

    id: str
    internal_id: str | None = Field(default=None, alias="_id")
    title: str | None = None
    date: str | None = None
    medium: str | None = None
    category: str | None = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# ============================================================================
# Gene views
# ============================================================================


@dataclass(frozen=True, slots=True)
class FullGene:
    """A gene fetched from the backend."""

    gene: GeneResponse

    @property
    def id(self) -> str:
        return self.gene.id


@dataclass(frozen=True, slots=True)
class GeneStub:
    """A gene known only by the id it was requested with.

    Produced when the query asked for nothing that needs gene data. Fields
    other than the identifier resolve to null.
    """

    id: str


GeneView = FullGene | GeneStub


__all__ = [
    "ArtistResponse",
    "ArtworkResponse",
    "FullGene",
    "GeneCounts",
    "GeneFamily",
    "GeneResponse",
    "GeneStub",
    "GeneView",
]
