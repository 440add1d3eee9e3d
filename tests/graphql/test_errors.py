"""Tests for GraphQL error classification and masking."""

from __future__ import annotations

import httpx
import pytest
from graphql import GraphQLError

from gene_service.core.exceptions import InvalidCursorException, NotFoundException
from gene_service.features.graphql.context import GraphQLContext
from gene_service.features.graphql.error_handler import is_user_facing_error, should_mask_error
from gene_service.features.graphql.extensions import MASKED_ERROR_MESSAGE
from gene_service.features.graphql.schema import create_schema
from tests.conftest import FakeLoaders


def _upstream_error(status_code: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "http://catalog.test/api/v1/gene/missing")
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError("upstream", request=request, response=response)


class TestClassification:
    def test_schema_errors_are_user_facing(self):
        assert is_user_facing_error(GraphQLError("Cannot query field 'nope'")) is True

    @pytest.mark.parametrize(
        "original",
        [
            InvalidCursorException("x", "bad"),
            NotFoundException(detail="Gene missing not found"),
        ],
    )
    def test_application_errors_are_user_facing(self, original):
        error = GraphQLError(str(original), original_error=original)
        assert is_user_facing_error(error) is True
        assert should_mask_error(error) is False

    def test_upstream_client_errors_are_user_facing(self):
        error = GraphQLError("upstream", original_error=_upstream_error(404))
        assert is_user_facing_error(error) is True

    def test_upstream_server_errors_are_masked(self):
        error = GraphQLError("upstream", original_error=_upstream_error(502))
        assert should_mask_error(error) is True

    def test_unexpected_errors_are_masked(self):
        error = GraphQLError("boom", original_error=RuntimeError("boom"))
        assert should_mask_error(error) is True


class TestProductionMasking:
    @pytest.fixture
    def production_schema(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("APP_ENVIRONMENT", "production")
        from gene_service.core.settings import clear_all_settings_caches

        clear_all_settings_caches()
        return create_schema()

    async def test_internal_errors_are_masked(self, production_schema):
        loaders = FakeLoaders()
        loaders.gene.side_effect = RuntimeError("database password is hunter2")

        result = await production_schema.execute(
            '{ gene(id: "abstract-painting") { name } }',
            context_value=GraphQLContext(loaders=loaders),
        )

        assert result.errors is not None
        assert result.errors[0].message == MASKED_ERROR_MESSAGE
        assert "hunter2" not in str(result.errors[0].formatted)

    async def test_validation_errors_are_not_masked(self, production_schema):
        result = await production_schema.execute(
            '{ gene(id: "abstract-painting") { artworks(first: -1) { counts { total } } } }',
            context_value=GraphQLContext(loaders=FakeLoaders()),
        )

        assert result.errors is not None
        assert result.errors[0].message == "Invalid value for first: must be a non-negative integer"
        assert result.errors[0].extensions["code"] == "VALIDATION_ERROR"

    async def test_upstream_not_found_is_not_masked(self, production_schema):
        loaders = FakeLoaders()
        loaders.gene.side_effect = _upstream_error(404)

        result = await production_schema.execute(
            '{ gene(id: "missing") { name } }',
            context_value=GraphQLContext(loaders=loaders),
        )

        assert result.errors is not None
        assert result.errors[0].message != MASKED_ERROR_MESSAGE
