"""Tests for random sampling of list fields."""

from __future__ import annotations

import random

import pytest

from gene_service.core.exceptions import InvalidPaginationArgumentException
from gene_service.features.genes.sampling import sample_items


def test_no_sample_keeps_order() -> None:
    assert sample_items([1, 2, 3]) == [1, 2, 3]


def test_sample_draws_distinct_items() -> None:
    items = list(range(20))

    picked = sample_items(items, 5, rng=random.Random(7))

    assert len(picked) == 5
    assert len(set(picked)) == 5
    assert set(picked) <= set(items)
    assert items == list(range(20))


def test_sample_is_deterministic_with_seeded_rng() -> None:
    assert sample_items("abcdef", 3, rng=random.Random(1)) == sample_items(
        "abcdef", 3, rng=random.Random(1)
    )


def test_sample_larger_than_list_returns_everything() -> None:
    assert sorted(sample_items([3, 1, 2], 10)) == [1, 2, 3]


def test_zero_sample_is_empty() -> None:
    assert sample_items([1, 2], 0) == []


def test_negative_sample_is_rejected() -> None:
    with pytest.raises(InvalidPaginationArgumentException):
        sample_items([1, 2], -1)
