"""Custom exception classes for the application."""

from __future__ import annotations

from typing import Any


class AppException(Exception):
    """Base application exception.

    All custom exceptions should inherit from this class.
    Follows RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        status_code: HTTP status code for the error.
        detail: Human-readable error message.
        type: Error type identifier (used in RFC 7807 problem details).
        title: Short, human-readable summary of the problem type.
        instance: URI reference that identifies the specific occurrence of the problem.
        extra: Additional context-specific information about the error.

    Example:
        raise AppException(
            status_code=404,
            detail="Gene not found",
            type="gene-not-found",
            extra={"gene_id": "abstract-painting"},
        )
    """

    code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        status_code: int,
        detail: str,
        type: str = "about:blank",
        title: str | None = None,
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize application exception.

        Args:
            status_code: HTTP status code.
            detail: Human-readable error message.
            type: Error type identifier.
            title: Short summary of the problem type.
            instance: URI reference identifying this specific occurrence.
            extra: Additional context about the error.
        """
        self.status_code = status_code
        self.detail = detail
        self.type = type
        self.title = title or self._default_title(status_code)
        self.instance = instance
        self.extra = extra or {}
        super().__init__(detail)

    @property
    def extensions(self) -> dict[str, Any]:
        """GraphQL error extensions; graphql-core copies these onto the error."""
        return {"code": self.code, "type": self.type, **self.extra}

    @staticmethod
    def _default_title(status_code: int) -> str:
        """Get default title for HTTP status code."""
        titles = {
            400: "Bad Request",
            404: "Not Found",
            422: "Unprocessable Entity",
            500: "Internal Server Error",
            502: "Bad Gateway",
        }
        return titles.get(status_code, "Error")


class NotFoundException(AppException):
    """Exception raised when a resource is not found.

    Example:
        raise NotFoundException(
            detail="Gene with ID abstract-painting not found",
            type="gene-not-found",
            extra={"gene_id": "abstract-painting"},
        )
    """

    code = "NOT_FOUND"

    def __init__(
        self,
        detail: str,
        type: str = "not-found",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=404,
            detail=detail,
            type=type,
            title="Not Found",
            instance=instance,
            extra=extra,
        )


class ValidationException(AppException):
    """Exception raised for validation errors.

    Example:
        raise ValidationException(
            detail="first must be a non-negative integer",
            type="validation-error",
            extra={"field": "first", "value": -1},
        )
    """

    code = "VALIDATION_ERROR"

    def __init__(
        self,
        detail: str,
        type: str = "validation-error",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=422,
            detail=detail,
            type=type,
            title="Validation Error",
            instance=instance,
            extra=extra,
        )


# ============================================================================
# Pagination Exceptions
# ============================================================================


class InvalidCursorException(ValidationException):
    """Raised when a pagination cursor cannot be decoded.

    Malformed cursors are surfaced to the caller instead of being coerced
    to the first page.
    """

    def __init__(self, cursor: str, reason: str) -> None:
        super().__init__(
            detail=f"Invalid cursor {cursor!r}: {reason}",
            type="invalid-cursor",
            extra={"cursor": cursor, "reason": reason},
        )
        self.cursor = cursor
        self.reason = reason


class InvalidPaginationArgumentException(ValidationException):
    """Raised for negative or otherwise unusable pagination arguments."""

    def __init__(self, argument: str, value: Any, reason: str) -> None:
        super().__init__(
            detail=f"Invalid value for {argument}: {reason}",
            type="invalid-pagination-argument",
            extra={"argument": argument, "value": value},
        )
        self.argument = argument
        self.value = value


__all__ = [
    "AppException",
    "InvalidCursorException",
    "InvalidPaginationArgumentException",
    "NotFoundException",
    "ValidationException",
]
