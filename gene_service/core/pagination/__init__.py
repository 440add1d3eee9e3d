"""Offset-backed Relay pagination.

The catalogue backend only understands offset/limit windows, while GraphQL
clients page with Relay cursors. This package bridges the two:

    args = ConnectionArgs(first=10, after=cursor)
    params = resolve_page_params(args, default_limit=10)   # offset/limit
    hits = await loader(size=params.limit, offset=params.offset)
    connection = connection_from_array_slice(
        hits, args, slice_start=params.offset, array_length=total
    )

Cursors are opaque base64 strings encoding an absolute index.
"""

from gene_service.core.pagination.connection import (
    build_connection,
    connection_from_array_slice,
    merge_side_channel,
)
from gene_service.core.pagination.cursor import (
    CursorCodec,
    decode_cursor,
    encode_cursor,
    offset_from_cursor,
)
from gene_service.core.pagination.params import (
    PAGINATION_ARGUMENTS,
    connection_args_from,
    resolve_page_params,
)
from gene_service.core.pagination.schemas import (
    ArraySlice,
    Connection,
    ConnectionArgs,
    Edge,
    PageInfo,
    PageParams,
)
from gene_service.core.pagination.totals import (
    FromBody,
    FromHeader,
    FromValue,
    TotalCountSource,
    resolve_total,
)

__all__ = [
    "PAGINATION_ARGUMENTS",
    "ArraySlice",
    "Connection",
    "ConnectionArgs",
    "CursorCodec",
    "Edge",
    "FromBody",
    "FromHeader",
    "FromValue",
    "PageInfo",
    "PageParams",
    "TotalCountSource",
    "build_connection",
    "connection_args_from",
    "connection_from_array_slice",
    "decode_cursor",
    "encode_cursor",
    "merge_side_channel",
    "offset_from_cursor",
    "resolve_page_params",
    "resolve_total",
]
