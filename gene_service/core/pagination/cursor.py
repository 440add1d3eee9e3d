"""Cursor encoding and decoding for offset-backed connections.

A cursor is an opaque string that encodes a single absolute index into an
ordered result set. The payload is ``arrayconnection:<index>`` encoded with
standard base64, the same format graphql-relay uses for array connections,
so cursors minted elsewhere stay interchangeable with ours.

Example:
    encode_cursor(5)                     # "YXJyYXljb25uZWN0aW9uOjU="
    decode_cursor("YXJyYXljb25uZWN0aW9uOjU=")  # 5

Cursors are only meaningful for the arguments they were issued under; a
cursor from a filtered listing may point elsewhere in a differently
filtered one.
"""

from __future__ import annotations

import base64
import binascii

from gene_service.core.exceptions import InvalidCursorException

CURSOR_PREFIX = "arrayconnection:"


class CursorCodec:
    """Encode and decode index cursors.

    Usage:
        cursor = CursorCodec.encode(3)
        CursorCodec.decode(cursor)  # 3
    """

    prefix = CURSOR_PREFIX

    @classmethod
    def encode(cls, index: int) -> str:
        """Encode an absolute index to an opaque cursor.

        Args:
            index: Zero-based position in the result set

        Returns:
            Base64 encoded cursor string

        Raises:
            InvalidCursorException: If index is negative
        """
        if index < 0:
            raise InvalidCursorException(str(index), "index must be non-negative")
        payload = f"{cls.prefix}{index}"
        return base64.b64encode(payload.encode()).decode()

    @classmethod
    def decode(cls, cursor: str) -> int:
        """Decode a cursor back to the index it was issued for.

        Args:
            cursor: Cursor string produced by encode()

        Returns:
            The encoded index

        Raises:
            InvalidCursorException: If the cursor is not base64, carries the
                wrong prefix or does not hold a non-negative integer
        """
        try:
            payload = base64.b64decode(cursor.encode(), validate=True).decode()
        except (binascii.Error, UnicodeError) as e:
            raise InvalidCursorException(cursor, "not a valid base64 string") from e

        if not payload.startswith(cls.prefix):
            raise InvalidCursorException(cursor, "unrecognized cursor format")

        raw_index = payload[len(cls.prefix) :]
        if not (raw_index.isascii() and raw_index.isdigit()):
            raise InvalidCursorException(cursor, "cursor does not encode a non-negative index")
        return int(raw_index)


def encode_cursor(index: int) -> str:
    """Shortcut for CursorCodec.encode()."""
    return CursorCodec.encode(index)


def decode_cursor(cursor: str) -> int:
    """Shortcut for CursorCodec.decode()."""
    return CursorCodec.decode(cursor)


def offset_from_cursor(cursor: str | None, default: int = -1) -> int:
    """Decode an optional cursor.

    An absent cursor yields ``default`` (-1, so that ``offset + 1`` is the
    first row). A present but malformed cursor still raises.
    """
    if cursor is None:
        return default
    return decode_cursor(cursor)


__all__ = [
    "CURSOR_PREFIX",
    "CursorCodec",
    "decode_cursor",
    "encode_cursor",
    "offset_from_cursor",
]
