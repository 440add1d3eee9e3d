"""Strawberry extensions for the GraphQL schema.

Provides:
- Query depth limiting
- Internal error masking outside development
"""

from __future__ import annotations

import logging

from strawberry.extensions import MaskErrors, QueryDepthLimiter, SchemaExtension

from gene_service.core.settings import get_app_settings
from gene_service.features.graphql.error_handler import should_mask_error

logger = logging.getLogger(__name__)

# Maximum query depth to prevent deeply nested queries
MAX_QUERY_DEPTH = 10

MASKED_ERROR_MESSAGE = "Unexpected error."


def get_extensions() -> list[SchemaExtension | type[SchemaExtension]]:
    """Get list of Strawberry extensions for the schema.

    Returns:
        List of extension instances
    """
    extensions: list[SchemaExtension | type[SchemaExtension]] = [
        QueryDepthLimiter(max_depth=MAX_QUERY_DEPTH),
    ]

    settings = get_app_settings()
    if settings.environment not in ("development", "test"):
        extensions.append(
            MaskErrors(should_mask_error=should_mask_error, error_message=MASKED_ERROR_MESSAGE)
        )

    logger.debug(
        "GraphQL extensions configured",
        extra={"depth_limit": MAX_QUERY_DEPTH, "masking": len(extensions) > 1},
    )
    return extensions


__all__ = ["MASKED_ERROR_MESSAGE", "MAX_QUERY_DEPTH", "get_extensions"]
