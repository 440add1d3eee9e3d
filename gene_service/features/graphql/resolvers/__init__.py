"""GraphQL resolvers for gene queries."""

from __future__ import annotations

from gene_service.features.graphql.resolvers.genes_queries import GeneQuery, gene_query

__all__ = ["GeneQuery", "gene_query"]
