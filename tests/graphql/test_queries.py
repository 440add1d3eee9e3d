"""Tests for the gene query and its connections."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gene_service.core.pagination import decode_cursor, encode_cursor
from gene_service.features.genes import UpstreamResponse
from gene_service.features.graphql.schema import schema
from tests.conftest import make_hits
from tests.graphql.conftest import GENE_ARTWORKS_QUERY, GENE_CHEAP_QUERY, GENE_QUERY

if TYPE_CHECKING:
    from gene_service.features.graphql.context import GraphQLContext
    from tests.conftest import FakeLoaders


async def test_cheap_fields_do_not_load_gene(
    graphql_context: GraphQLContext,
    fake_loaders: FakeLoaders,
) -> None:
    result = await schema.execute(
        GENE_CHEAP_QUERY,
        variable_values={"id": "abstract-painting"},
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data == {"gene": {"id": "abstract-painting", "href": "/gene/abstract-painting"}}
    fake_loaders.gene.assert_not_called()


async def test_gene_fields(graphql_context: GraphQLContext, fake_loaders: FakeLoaders) -> None:
    result = await schema.execute(
        GENE_QUERY,
        variable_values={"id": "abstract-painting"},
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data is not None
    assert result.data["gene"] == {
        "id": "abstract-painting",
        "internalID": "4d90d18edcdd5f44a5000010",
        "slug": "abstract-painting",
        "name": "Abstract Painting",
        "displayName": "Abstract Painting (Genre)",
        "description": "Painting that does not depict recognizable subjects.",
        "href": "/gene/abstract-painting",
        "isPublished": True,
        "mode": "artist",
        "isFollowed": False,
    }
    fake_loaders.gene.assert_awaited_once_with("abstract-painting")


async def test_internal_id_requires_fetch(
    graphql_context: GraphQLContext,
    fake_loaders: FakeLoaders,
) -> None:
    result = await schema.execute(
        '{ gene(id: "abstract-painting") { internalID } }',
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data == {"gene": {"internalID": "4d90d18edcdd5f44a5000010"}}
    fake_loaders.gene.assert_awaited_once()


async def test_image_urls(graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        """
        {
          gene(id: "abstract-painting") {
            image { versions square: url thumb: url(version: "thumb") large: url(version: "large") }
          }
        }
        """,
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data == {
        "gene": {
            "image": {
                "versions": ["square", "thumb"],
                "square": "https://images.example/abstract-painting/square.jpg",
                "thumb": "https://images.example/abstract-painting/thumb.jpg",
                "large": "https://images.example/abstract-painting/square.jpg",
            }
        }
    }


async def test_gene_without_image(
    graphql_context: GraphQLContext,
    fake_loaders: FakeLoaders,
) -> None:
    fake_loaders.gene.side_effect = None
    fake_loaders.gene.return_value = {"id": "minimalism", "name": "Minimalism"}

    result = await schema.execute(
        '{ gene(id: "minimalism") { name image { versions } } }',
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data == {"gene": {"name": "Minimalism", "image": None}}


async def test_artworks_connection_with_aggregations(
    graphql_context: GraphQLContext,
    fake_loaders: FakeLoaders,
) -> None:
    fake_loaders.filter_artworks.return_value = {
        "hits": make_hits("artwork", 2, 2),
        "aggregations": {
            "total": {"value": 6},
            "medium": [{"value": "painting", "count": 4}],
        },
    }

    result = await schema.execute(
        GENE_ARTWORKS_QUERY,
        variable_values={
            "id": "abstract-painting",
            "first": 2,
            "after": encode_cursor(1),
            "aggregations": ["medium"],
        },
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data is not None
    artworks = result.data["gene"]["artworks"]
    assert [edge["node"]["id"] for edge in artworks["edges"]] == ["artwork-2", "artwork-3"]
    assert [decode_cursor(edge["cursor"]) for edge in artworks["edges"]] == [2, 3]
    assert artworks["pageInfo"] == {
        "hasNextPage": True,
        "hasPreviousPage": True,
        "startCursor": encode_cursor(2),
        "endCursor": encode_cursor(3),
        "totalCount": 6,
    }
    assert artworks["counts"] == {"total": 6}
    assert artworks["aggregations"]["medium"] == [{"value": "painting", "count": 4}]

    fake_loaders.gene.assert_not_called()
    params = fake_loaders.filter_artworks.await_args.args[0]
    assert params["gene_id"] == "abstract-painting"
    assert params["for_sale"] is True
    assert params["offset"] == 2
    assert params["aggregations"] == ["medium", "total"]
    assert "medium" not in params


async def test_artworks_filter_arguments_are_renamed(
    graphql_context: GraphQLContext,
    fake_loaders: FakeLoaders,
) -> None:
    result = await schema.execute(
        """
        {
          gene(id: "abstract-painting") {
            artworks(artistIDs: ["a1", "a2"], priceRange: "*-1000", partnerCities: ["Berlin"]) {
              counts { total }
            }
          }
        }
        """,
        context_value=graphql_context,
    )

    assert result.errors is None
    params = fake_loaders.filter_artworks.await_args.args[0]
    assert params["artist_ids"] == ["a1", "a2"]
    assert params["price_range"] == "*-1000"
    assert params["partner_cities"] == ["Berlin"]
    assert (params["size"], params["offset"], params["page"]) == (10, 0, 1)


async def test_single_value_list_arguments_are_coerced(
    graphql_context: GraphQLContext,
    fake_loaders: FakeLoaders,
) -> None:
    result = await schema.execute(
        """
        {
          gene(id: "abstract-painting") {
            artworks(aggregations: "medium", artistIDs: "a1", majorPeriods: "1970") {
              counts { total }
            }
          }
        }
        """,
        context_value=graphql_context,
    )

    assert result.errors is None
    params = fake_loaders.filter_artworks.await_args.args[0]
    assert params["aggregations"] == ["medium", "total"]
    assert params["artist_ids"] == ["a1"]
    assert params["major_periods"] == ["1970"]


async def test_omitted_variables_are_not_forwarded(
    graphql_context: GraphQLContext,
    fake_loaders: FakeLoaders,
) -> None:
    result = await schema.execute(
        GENE_ARTWORKS_QUERY,
        variable_values={"id": "abstract-painting", "aggregations": "medium"},
        context_value=graphql_context,
    )

    assert result.errors is None
    params = fake_loaders.filter_artworks.await_args.args[0]
    assert params["aggregations"] == ["medium", "total"]
    assert params["size"] == 10
    assert params["offset"] == 0


async def test_artists_connection_uses_gene_counts(
    graphql_context: GraphQLContext,
    fake_loaders: FakeLoaders,
) -> None:
    result = await schema.execute(
        """
        {
          gene(id: "abstract-painting") {
            artists(first: 2) {
              edges { node { id internalID name } }
              pageInfo { hasNextPage totalCount }
            }
          }
        }
        """,
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data is not None
    artists = result.data["gene"]["artists"]
    assert artists["edges"][0]["node"] == {
        "id": "artist-0",
        "internalID": "artist-internal-0",
        "name": "artist 0",
    }
    assert artists["pageInfo"] == {"hasNextPage": True, "totalCount": 3}
    fake_loaders.gene.assert_awaited_once_with("abstract-painting")


async def test_similar_uses_total_count_header(
    graphql_context: GraphQLContext,
    fake_loaders: FakeLoaders,
) -> None:
    fake_loaders.similar_genes.return_value = UpstreamResponse(
        body=make_hits("gene", 0, 2),
        headers={"X-Total-Count": "5"},
    )

    result = await schema.execute(
        """
        {
          gene(id: "abstract-painting") {
            similar(first: 2, excludeGeneIDs: ["4e5e41670d2c670001030350"]) {
              edges { node { id name href } }
              pageInfo { hasNextPage totalCount }
            }
          }
        }
        """,
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data is not None
    similar = result.data["gene"]["similar"]
    assert [edge["node"]["id"] for edge in similar["edges"]] == ["gene-0", "gene-1"]
    assert similar["edges"][0]["node"]["href"] == "/gene/gene-0"
    assert similar["pageInfo"] == {"hasNextPage": True, "totalCount": 5}
    fake_loaders.gene.assert_not_called()
    fake_loaders.similar_genes.assert_awaited_once_with(
        "abstract-painting",
        {
            "size": 2,
            "offset": 0,
            "exclude_gene_ids": ["4e5e41670d2c670001030350"],
            "total_count": True,
        },
    )


async def test_similar_without_header_is_empty(
    graphql_context: GraphQLContext,
    fake_loaders: FakeLoaders,
) -> None:
    fake_loaders.similar_genes.return_value = UpstreamResponse(body=make_hits("gene", 0, 2))

    result = await schema.execute(
        '{ gene(id: "abstract-painting") { similar { edges { cursor } pageInfo { totalCount } } } }',
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data == {"gene": {"similar": {"edges": [], "pageInfo": {"totalCount": 0}}}}


async def test_trending_artists_sample(
    graphql_context: GraphQLContext,
    fake_loaders: FakeLoaders,
) -> None:
    result = await schema.execute(
        '{ gene(id: "abstract-painting") { trendingArtists(sample: 2) { id } } }',
        context_value=graphql_context,
    )

    assert result.errors is None
    assert result.data is not None
    assert len(result.data["gene"]["trendingArtists"]) == 2
    fake_loaders.gene.assert_not_called()


async def test_invalid_cursor_is_reported(graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        GENE_ARTWORKS_QUERY,
        variable_values={"id": "abstract-painting", "first": 2, "after": "not-a-cursor!"},
        context_value=graphql_context,
    )

    assert result.errors is not None
    error = result.errors[0]
    assert "not-a-cursor!" in error.message
    assert error.extensions["code"] == "VALIDATION_ERROR"
    assert error.extensions["type"] == "invalid-cursor"
    assert error.path == ["gene", "artworks"]


async def test_last_without_before_is_reported(graphql_context: GraphQLContext) -> None:
    result = await schema.execute(
        '{ gene(id: "abstract-painting") { artworks(last: 3) { counts { total } } } }',
        context_value=graphql_context,
    )

    assert result.errors is not None
    assert result.errors[0].extensions["type"] == "invalid-pagination-argument"
