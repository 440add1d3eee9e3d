"""Tests for GraphQL to catalogue argument translation."""

from __future__ import annotations

import pytest

from gene_service.core.exceptions import InvalidPaginationArgumentException
from gene_service.core.pagination import encode_cursor
from gene_service.features.genes.arguments import (
    FILTER_ARGUMENT_NAMES,
    to_backend_name,
    to_graphql_name,
    translate_artist_args,
    translate_filter_args,
    translate_similar_args,
)

LIMITS = {"default_limit": 10, "max_limit": 100}


class TestNameTable:
    def test_known_names_map_both_ways(self):
        assert to_backend_name("artistIDs") == "artist_ids"
        assert to_graphql_name("artist_ids") == "artistIDs"

    def test_unknown_names_pass_through(self):
        assert to_backend_name("sort") == "sort"
        assert to_graphql_name("sort") == "sort"

    def test_table_is_a_bijection(self):
        assert len(set(FILTER_ARGUMENT_NAMES.values())) == len(FILTER_ARGUMENT_NAMES)


class TestTranslateFilterArgs:
    def test_readme_example(self):
        params = translate_filter_args(
            {"first": 10, "priceRange": "*-1000", "medium": "*"},
            gene_id="abstract-painting",
            **LIMITS,
        )

        assert params == {
            "size": 10,
            "offset": 0,
            "page": 1,
            "price_range": "*-1000",
            "aggregations": ["total"],
            "gene_id": "abstract-painting",
        }

    def test_after_cursor_sets_offset_and_page(self):
        params = translate_filter_args(
            {"first": 10, "after": encode_cursor(19)}, gene_id="g", **LIMITS
        )
        assert (params["size"], params["offset"], params["page"]) == (10, 20, 3)

    def test_total_is_appended_without_mutating_input(self):
        aggregations = ["medium", "price_range"]

        params = translate_filter_args({"aggregations": aggregations}, gene_id="g", **LIMITS)

        assert params["aggregations"] == ["medium", "price_range", "total"]
        assert aggregations == ["medium", "price_range"]

    def test_total_is_not_duplicated(self):
        params = translate_filter_args({"aggregations": ["total"]}, gene_id="g", **LIMITS)
        assert params["aggregations"] == ["total"]

    @pytest.mark.parametrize("medium", ["*", "", None])
    def test_wildcard_medium_is_dropped(self, medium):
        params = translate_filter_args({"medium": medium}, gene_id="g", **LIMITS)
        assert "medium" not in params

    def test_specific_medium_is_kept(self):
        params = translate_filter_args({"medium": "painting"}, gene_id="g", **LIMITS)
        assert params["medium"] == "painting"

    def test_gene_id_always_wins(self):
        params = translate_filter_args({"geneID": "other-gene"}, gene_id="abstract-painting", **LIMITS)
        assert params["gene_id"] == "abstract-painting"

    def test_unknown_arguments_and_nulls(self):
        params = translate_filter_args(
            {"sort": "-decayed_merch", "forSale": True, "saleID": None}, gene_id="g", **LIMITS
        )

        assert params["sort"] == "-decayed_merch"
        assert params["for_sale"] is True
        assert "sale_id" not in params
        assert "first" not in params

    def test_oversized_first_is_rejected(self):
        with pytest.raises(InvalidPaginationArgumentException):
            translate_filter_args({"first": 1000}, gene_id="g", **LIMITS)


class TestTranslateArtistArgs:
    def test_offset_paging_without_page(self):
        params = translate_artist_args({"first": 5, "after": encode_cursor(4)}, **LIMITS)

        assert params == {"size": 5, "offset": 5, "exclude_artists_without_artworks": True}


class TestTranslateSimilarArgs:
    def test_defaults(self):
        params = translate_similar_args({}, **LIMITS)
        assert params == {"size": 10, "offset": 0, "total_count": True}

    def test_exclusions_are_forwarded(self):
        excluded = ["4d90d18edcdd5f44a5000010"]

        params = translate_similar_args({"first": 2}, exclude_gene_ids=excluded, **LIMITS)

        assert params["exclude_gene_ids"] == excluded
        assert params["exclude_gene_ids"] is not excluded

    def test_empty_exclusion_list_is_kept(self):
        params = translate_similar_args({}, exclude_gene_ids=[], **LIMITS)
        assert params["exclude_gene_ids"] == []
