"""Translate GraphQL connection arguments into catalogue query parameters.

GraphQL arguments are camelCase and domain-named; the catalogue API wants
snake_case parameters plus offset-style paging. The renaming lives in one
static table so the translation is a pure function of its input:

    translate_filter_args({"first": 10, "priceRange": "*-1000", "medium": "*"},
                          gene_id="abstract-painting", default_limit=10)
    # {"size": 10, "offset": 0, "page": 1, "price_range": "*-1000",
    #  "aggregations": ["total"], "gene_id": "abstract-painting"}

Arguments missing from the table pass through unchanged, so new backend
filters work without code changes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from gene_service.core.pagination import (
    PAGINATION_ARGUMENTS,
    PageParams,
    connection_args_from,
    resolve_page_params,
)

MEDIUM_WILDCARD = "*"
TOTAL_AGGREGATION = "total"

FILTER_ARGUMENT_NAMES: Mapping[str, str] = {
    "aggregationPartnerCities": "aggregation_partner_cities",
    "artistID": "artist_id",
    "artistIDs": "artist_ids",
    "atAuction": "at_auction",
    "attributionClass": "attribution_class",
    "dimensionRange": "dimension_range",
    "extraAggregationGeneIDs": "extra_aggregation_gene_ids",
    "includeArtworksByFollowedArtists": "include_artworks_by_followed_artists",
    "includeMediumFilterInAggregation": "include_medium_filter_in_aggregation",
    "inquireableOnly": "inquireable_only",
    "forSale": "for_sale",
    "geneID": "gene_id",
    "geneIDs": "gene_ids",
    "majorPeriods": "major_periods",
    "partnerID": "partner_id",
    "partnerCities": "partner_cities",
    "priceRange": "price_range",
    "saleID": "sale_id",
    "tagID": "tag_id",
    "keywordMatchExact": "keyword_match_exact",
}

BACKEND_ARGUMENT_NAMES: Mapping[str, str] = {
    backend: graphql for graphql, backend in FILTER_ARGUMENT_NAMES.items()
}


def to_backend_name(name: str) -> str:
    """Backend parameter name for a GraphQL argument (identity if unmapped)."""
    return FILTER_ARGUMENT_NAMES.get(name, name)


def to_graphql_name(name: str) -> str:
    """GraphQL argument name for a backend parameter (identity if unmapped)."""
    return BACKEND_ARGUMENT_NAMES.get(name, name)


def paging_params(params: PageParams, *, include_page: bool = True) -> dict[str, int]:
    """Offset-style paging parameters for the catalogue API."""
    paging = {"size": params.limit, "offset": params.offset}
    if include_page:
        paging["page"] = params.page
    return paging


def _rename(args: Mapping[str, Any]) -> dict[str, Any]:
    return {
        to_backend_name(name): value
        for name, value in args.items()
        if name not in PAGINATION_ARGUMENTS and value is not None
    }


def _page_params(
    args: Mapping[str, Any], default_limit: int, max_limit: int | None
) -> PageParams:
    return resolve_page_params(
        connection_args_from(args), default_limit=default_limit, max_limit=max_limit
    )


def translate_filter_args(
    args: Mapping[str, Any],
    *,
    gene_id: str,
    default_limit: int,
    max_limit: int | None = None,
) -> dict[str, Any]:
    """Build ``/filter/artworks`` parameters for a gene's artworks.

    - table-driven renaming, unknown arguments passed through
    - ``"total"`` always requested as an aggregation
    - a wildcard or empty ``medium`` is dropped
    - ``gene_id`` is always the resolving gene's id
    """
    params = _rename(args)
    params.update(paging_params(_page_params(args, default_limit, max_limit)))

    aggregations = list(params.get("aggregations") or [])
    if TOTAL_AGGREGATION not in aggregations:
        aggregations.append(TOTAL_AGGREGATION)
    params["aggregations"] = aggregations

    if params.get("medium") in (None, "", MEDIUM_WILDCARD):
        params.pop("medium", None)

    params["gene_id"] = gene_id
    return params


def translate_artist_args(
    args: Mapping[str, Any],
    *,
    default_limit: int,
    max_limit: int | None = None,
) -> dict[str, Any]:
    """Build ``/gene/{id}/artists`` parameters.

    The endpoint pages by offset only, and artists without artworks are
    always excluded.
    """
    params = _rename(args)
    params.update(
        paging_params(_page_params(args, default_limit, max_limit), include_page=False)
    )
    params["exclude_artists_without_artworks"] = True
    return params


def translate_similar_args(
    args: Mapping[str, Any],
    *,
    exclude_gene_ids: list[str] | None = None,
    default_limit: int,
    max_limit: int | None = None,
) -> dict[str, Any]:
    """Build ``/related/genes`` parameters.

    Only paging, the exclusion list and the total-count flag are forwarded;
    the endpoint accepts no other filters.
    """
    page = _page_params(args, default_limit, max_limit)
    params: dict[str, Any] = {"size": page.limit, "offset": page.offset}
    if exclude_gene_ids is not None:
        params["exclude_gene_ids"] = list(exclude_gene_ids)
    params["total_count"] = True
    return params


__all__ = [
    "BACKEND_ARGUMENT_NAMES",
    "FILTER_ARGUMENT_NAMES",
    "MEDIUM_WILDCARD",
    "TOTAL_AGGREGATION",
    "paging_params",
    "to_backend_name",
    "to_graphql_name",
    "translate_artist_args",
    "translate_filter_args",
    "translate_similar_args",
]
