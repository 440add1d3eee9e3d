"""Field demand analysis for skipping unnecessary backend fetches.

A client paginating into ``gene { artworks(after: ...) }`` never asks for
gene data itself, so there is no reason to load the gene. Resolvers collect
the fields selected on their node here and let the gene service compare
them against the fields that can be answered without a fetch.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any

from strawberry.types.nodes import FragmentSpread, InlineFragment, SelectedField

from gene_service.features.genes.demand import requires_fetch

if TYPE_CHECKING:
    from strawberry.types import Info

TYPENAME_FIELD = "__typename"


def _field_names(selections: Iterable[Any]) -> Iterator[str]:
    for selection in selections:
        if isinstance(selection, SelectedField):
            if selection.name != TYPENAME_FIELD:
                yield selection.name
        elif isinstance(selection, (InlineFragment, FragmentSpread)):
            yield from _field_names(selection.selections)


def requested_field_names(info: Info) -> set[str]:
    """Names of the fields selected on the field being resolved.

    Fragments are flattened and ``__typename`` is ignored, since the type
    system answers it without data.
    """
    names: set[str] = set()
    for field in info.selected_fields:
        names.update(_field_names(field.selections))
    return names


__all__ = ["requested_field_names", "requires_fetch"]
