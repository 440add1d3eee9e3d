"""Translate Relay connection arguments into offset/limit windows.

Forward pagination (``first``/``after``) maps directly onto an offset:
the row after the ``after`` cursor. Backward pagination (``last``/``before``)
computes the window that ends just before the ``before`` cursor.

When both directions are supplied, forward pagination takes precedence.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from gene_service.core.exceptions import InvalidPaginationArgumentException
from gene_service.core.pagination.cursor import offset_from_cursor
from gene_service.core.pagination.schemas import ConnectionArgs, PageParams

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

PAGINATION_ARGUMENTS = ("first", "after", "last", "before")


def connection_args_from(values: Mapping[str, Any]) -> ConnectionArgs:
    """Pick the Relay arguments out of a resolver's keyword arguments."""
    return ConnectionArgs(**{key: values.get(key) for key in PAGINATION_ARGUMENTS})


def _check_count(name: str, value: int | None, max_limit: int | None) -> None:
    if value is None:
        return
    if value < 0:
        raise InvalidPaginationArgumentException(name, value, "must be a non-negative integer")
    if max_limit is not None and value > max_limit:
        raise InvalidPaginationArgumentException(
            name, value, f"must not be greater than {max_limit}"
        )


def resolve_page_params(
    args: ConnectionArgs,
    *,
    default_limit: int,
    max_limit: int | None = None,
) -> PageParams:
    """Derive the backend window for a set of connection arguments.

    Args:
        args: Relay connection arguments
        default_limit: Page size used when neither first nor last is given
        max_limit: Optional upper bound for first/last

    Returns:
        PageParams with limit and offset

    Raises:
        InvalidPaginationArgumentException: For negative or oversized counts,
            or backward pagination without a ``before`` cursor
        InvalidCursorException: If a cursor cannot be decoded

    Example:
        resolve_page_params(ConnectionArgs(first=5, after=encode_cursor(9)), default_limit=10)
        # PageParams(limit=5, offset=10)
    """
    _check_count("first", args.first, max_limit)
    _check_count("last", args.last, max_limit)

    if args.is_forward:
        if args.is_backward:
            logger.debug(
                "Both forward and backward pagination arguments supplied; using forward",
                extra={"first": args.first, "last": args.last},
            )
        limit = args.first if args.first is not None else default_limit
        offset = offset_from_cursor(args.after) + 1
        return PageParams(limit=limit, offset=offset)

    if args.is_backward:
        if args.before is None:
            raise InvalidPaginationArgumentException(
                "last", args.last, "backward pagination requires a 'before' cursor"
            )
        limit = args.last if args.last is not None else default_limit
        offset = offset_from_cursor(args.before) - limit
        if offset < 0:
            limit = max(limit + offset, 0)
            offset = 0
        return PageParams(limit=limit, offset=offset)

    return PageParams(limit=default_limit, offset=0)


__all__ = ["PAGINATION_ARGUMENTS", "connection_args_from", "resolve_page_params"]
