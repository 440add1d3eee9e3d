"""Build Relay connections from offset-based result slices.

The backend returns a flat window of results plus the total length of the
full result set. This module rebuilds edges, cursors and page info from
that window and attaches side-channel data (aggregations, counts) next to
them.

Usage:
    params = resolve_page_params(args, default_limit=10)
    hits = await loader(offset=params.offset, size=params.limit)
    connection = connection_from_array_slice(
        hits, args, slice_start=params.offset, array_length=total
    )
    connection = merge_side_channel(connection, {"aggregations": aggregations})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from gene_service.core.pagination.cursor import encode_cursor, offset_from_cursor
from gene_service.core.pagination.schemas import (
    ArraySlice,
    Connection,
    ConnectionArgs,
    Edge,
    PageInfo,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

logger = logging.getLogger(__name__)

T = TypeVar("T")

RESERVED_CONNECTION_FIELDS = frozenset({"edges", "page_info"})


def connection_from_array_slice(
    items: Sequence[T],
    args: ConnectionArgs | None = None,
    *,
    slice_start: int,
    array_length: int,
) -> Connection[T]:
    """Build a connection from a window of an ordered result set.

    Args:
        items: Items starting at absolute index ``slice_start``
        args: Connection arguments the window was fetched for
        slice_start: Absolute index of ``items[0]``
        array_length: Authoritative length of the full result set

    Returns:
        Connection whose edge cursors encode absolute indexes

    Reported windows that extend past ``array_length`` are clamped to it,
    never rejected.
    """
    args = args or ConnectionArgs()
    slice_start = max(slice_start, 0)
    array_length = max(array_length, 0)
    slice_end = slice_start + len(items)

    if slice_end > array_length:
        logger.warning(
            "Upstream slice extends past reported length; clamping",
            extra={
                "slice_start": slice_start,
                "slice_length": len(items),
                "array_length": array_length,
            },
        )

    # Forward arguments win; a before cursor only bounds backward pages.
    if args.is_forward:
        before_offset = array_length
    else:
        before_offset = offset_from_cursor(args.before, default=array_length)
    after_offset = offset_from_cursor(args.after, default=-1)

    start_offset = max(slice_start, after_offset + 1)
    end_offset = min(slice_end, array_length, before_offset)

    if args.first is not None:
        end_offset = min(end_offset, start_offset + args.first)
    if args.last is not None and not args.is_forward:
        start_offset = max(start_offset, end_offset - args.last)

    window = items[max(start_offset - slice_start, 0) : max(end_offset - slice_start, 0)]
    edges = [
        Edge[Any](node=node, cursor=encode_cursor(start_offset + position))
        for position, node in enumerate(window)
    ]

    page_info = PageInfo(
        has_previous_page=start_offset > 0,
        has_next_page=max(end_offset, start_offset) < array_length,
        start_cursor=edges[0].cursor if edges else None,
        end_cursor=edges[-1].cursor if edges else None,
        total_count=array_length,
    )
    return Connection[Any](edges=edges, page_info=page_info)


def build_connection(array_slice: ArraySlice[T], args: ConnectionArgs | None = None) -> Connection[T]:
    """Build a connection from an ArraySlice model."""
    return connection_from_array_slice(
        array_slice.items,
        args,
        slice_start=array_slice.slice_start,
        array_length=array_slice.array_length,
    )


def merge_side_channel(
    connection: Connection[T],
    payload: Mapping[str, Any] | None,
) -> Connection[T]:
    """Attach auxiliary response data to a connection.

    Returns a copy carrying ``payload`` keys as top-level extension fields.
    Edges and page info are shared with the original, never modified.

    Raises:
        ValueError: If payload tries to replace ``edges`` or ``page_info``
    """
    if not payload:
        return connection

    clashing = RESERVED_CONNECTION_FIELDS.intersection(payload)
    if clashing:
        msg = f"Side-channel data cannot replace connection fields: {sorted(clashing)}"
        raise ValueError(msg)

    return type(connection).model_construct(
        edges=connection.edges,
        page_info=connection.page_info,
        **{**connection.extensions, **payload},
    )


__all__ = [
    "build_connection",
    "connection_from_array_slice",
    "merge_side_channel",
]
