"""Modular Pydantic Settings v2 configuration.

Each domain has its own settings class and environment prefix:

- APP_: service identity and environment
- CATALOG_: catalogue backend client
- GRAPHQL_: GraphQL endpoint
- LOG_: logging
- PAGINATION_: page sizes for connection fields

Import settings via cached loaders:
    from gene_service.core.settings import get_pagination_settings
"""

from __future__ import annotations

from .app import AppSettings
from .catalog import CatalogSettings
from .graphql import GraphQLSettings
from .loader import (
    clear_all_settings_caches,
    get_app_settings,
    get_catalog_settings,
    get_graphql_settings,
    get_logging_settings,
    get_pagination_settings,
)
from .logs import LoggingSettings
from .pagination import PaginationSettings

__all__ = [
    "AppSettings",
    "CatalogSettings",
    "GraphQLSettings",
    "LoggingSettings",
    "PaginationSettings",
    "clear_all_settings_caches",
    "get_app_settings",
    "get_catalog_settings",
    "get_graphql_settings",
    "get_logging_settings",
    "get_pagination_settings",
]
