"""GraphQL error classification and logging.

Errors raised by resolvers fall into two groups:

- User-facing: pagination and cursor problems, unknown genes, upstream
  4xx responses. Their message and extensions go to the client unchanged.
- Internal: everything else. In production they are replaced by a generic
  message (see extensions.py); the full error is always logged here.

Application exceptions carry a ``code`` that graphql-core copies into the
error's extensions, so classification keys off that first.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx
from graphql import GraphQLError

from gene_service.core.exceptions import AppException

if TYPE_CHECKING:
    from strawberry.types import ExecutionContext

logger = logging.getLogger(__name__)

__all__ = [
    "ErrorCategory",
    "is_user_facing_error",
    "log_error",
    "should_mask_error",
]


class ErrorCategory:
    """Error categories for classification."""

    VALIDATION = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    UPSTREAM = "UPSTREAM_ERROR"
    INTERNAL = "INTERNAL_ERROR"


USER_FACING_CODES = frozenset(
    {ErrorCategory.VALIDATION, ErrorCategory.NOT_FOUND, ErrorCategory.UPSTREAM}
)


def is_user_facing_error(error: GraphQLError) -> bool:
    """Determine if an error should be shown to the client as-is.

    Query syntax and schema validation errors have no original error and
    are always user-facing. Upstream 4xx responses are too, since they
    describe the request rather than this service.
    """
    original = error.original_error
    if original is None:
        return True

    if isinstance(original, AppException):
        return original.code in USER_FACING_CODES

    if isinstance(original, httpx.HTTPStatusError):
        return original.response.is_client_error

    extensions = error.extensions or {}
    return extensions.get("code") in USER_FACING_CODES


def should_mask_error(error: GraphQLError) -> bool:
    """Predicate for the masking extension: mask everything not user-facing."""
    return not is_user_facing_error(error)


def log_error(error: GraphQLError, execution_context: ExecutionContext | None = None) -> None:
    """Log a GraphQL error with its path and operation.

    User-facing errors log at INFO without a traceback; internal errors log
    at ERROR with the original exception attached.
    """
    operation = execution_context.operation_name if execution_context else None
    extra = {
        "graphql_path": list(error.path) if error.path else None,
        "operation": operation,
        "error_code": (error.extensions or {}).get("code", ErrorCategory.INTERNAL),
    }

    if is_user_facing_error(error):
        logger.info("GraphQL error: %s", error.message, extra=extra)
        return

    original = error.original_error
    logger.error(
        "Unhandled GraphQL error: %s",
        error.message,
        extra={**extra, "exception_type": type(original).__name__},
        exc_info=(type(original), original, original.__traceback__) if original else None,
    )
