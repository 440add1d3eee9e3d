"""GraphQL test fixtures.

Provides:
- GraphQL context backed by in-memory loaders
- Shared query documents
"""

from __future__ import annotations

import pytest

from gene_service.features.graphql.context import GraphQLContext
from tests.conftest import FakeLoaders

GENE_CHEAP_QUERY = """
query GeneCheap($id: String!) {
  gene(id: $id) { id href }
}
"""

GENE_QUERY = """
query Gene($id: String!) {
  gene(id: $id) {
    id
    internalID
    slug
    name
    displayName
    description
    href
    isPublished
    mode
    isFollowed
  }
}
"""

GENE_ARTWORKS_QUERY = """
query GeneArtworks($id: String!, $first: Int, $after: String, $aggregations: [String!]) {
  gene(id: $id) {
    artworks(first: $first, after: $after, aggregations: $aggregations, medium: "*", forSale: true) {
      edges { cursor node { id title } }
      pageInfo { hasNextPage hasPreviousPage startCursor endCursor totalCount }
      aggregations
      counts { total }
    }
  }
}
"""


@pytest.fixture
def graphql_context(fake_loaders: FakeLoaders) -> GraphQLContext:
    """Create GraphQL context for testing."""
    return GraphQLContext(loaders=fake_loaders, correlation_id="test-correlation-id")
