"""External service clients."""

from gene_service.infra.external.base_client import BaseHTTPClient
from gene_service.infra.external.catalog_client import CatalogClient, encode_query

__all__ = ["BaseHTTPClient", "CatalogClient", "encode_query"]
