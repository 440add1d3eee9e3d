"""Random sampling for non-paginated list fields."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

from gene_service.core.exceptions import InvalidPaginationArgumentException

T = TypeVar("T")


def sample_items(
    items: Sequence[T],
    sample: int | None = None,
    *,
    rng: random.Random | None = None,
) -> list[T]:
    """Return a random selection of ``sample`` items, or all items in order.

    Args:
        items: Source list
        sample: Number of items to draw; None keeps the list unchanged
        rng: Random generator (injectable for deterministic tests)

    Raises:
        InvalidPaginationArgumentException: If sample is negative
    """
    if sample is None:
        return list(items)
    if sample < 0:
        raise InvalidPaginationArgumentException("sample", sample, "must be a non-negative integer")

    shuffled = list(items)
    (rng or random).shuffle(shuffled)
    return shuffled[:sample]


__all__ = ["sample_items"]
