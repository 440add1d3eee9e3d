"""Decide whether a gene has to be fetched for a set of requested fields."""

from __future__ import annotations

from collections.abc import Iterable


def requires_fetch(requested: Iterable[str], cheap_fields: Iterable[str]) -> bool:
    """Whether any requested field falls outside the cheap field list.

    Example:
        requires_fetch({"id", "internalID"}, {"id", "internalID"})  # False
        requires_fetch({"id", "name"}, {"id", "internalID"})        # True
    """
    return not set(requested) <= set(cheap_fields)


__all__ = ["requires_fetch"]
