"""Where the total length of a listing comes from.

Backends report totals in different places: inside the response body
(an aggregation), in a response header, or the total is already known from
the parent entity. Call sites describe the location with a TotalCountSource
and resolve it uniformly.

A total that cannot be found is treated as 0, which produces an empty
connection instead of failing the request.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FromBody:
    """Total found by walking ``path`` through the response body."""

    path: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class FromHeader:
    """Total carried by a response header (case-insensitive)."""

    key: str = "X-Total-Count"


@dataclass(frozen=True, slots=True)
class FromValue:
    """Total already known to the caller."""

    value: int | None


TotalCountSource = FromBody | FromHeader | FromValue


def _as_count(raw: Any, origin: str) -> int:
    if raw is None:
        logger.debug("Total count missing; defaulting to 0", extra={"origin": origin})
        return 0
    try:
        count = int(raw)
    except (TypeError, ValueError):
        logger.warning(
            "Unparseable total count; defaulting to 0",
            extra={"origin": origin, "value": str(raw)},
        )
        return 0
    return max(count, 0)


def _header(headers: Mapping[str, str], key: str) -> str | None:
    wanted = key.lower()
    for name, value in headers.items():
        if name.lower() == wanted:
            return value
    return None


def _walk(body: Any, path: tuple[str, ...]) -> Any:
    current = body
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def resolve_total(
    source: TotalCountSource,
    *,
    body: Any = None,
    headers: Mapping[str, str] | None = None,
) -> int:
    """Resolve a total count from its source.

    Args:
        source: Where the total lives
        body: Decoded response body (for FromBody)
        headers: Response headers (for FromHeader)

    Returns:
        Non-negative total, 0 when missing or malformed
    """
    match source:
        case FromHeader(key=key):
            return _as_count(_header(headers or {}, key), f"header:{key}")
        case FromBody(path=path):
            return _as_count(_walk(body, path), "body:" + ".".join(path))
        case FromValue(value=value):
            return _as_count(value, "value")
    msg = f"Unsupported total count source: {source!r}"
    raise TypeError(msg)


__all__ = [
    "FromBody",
    "FromHeader",
    "FromValue",
    "TotalCountSource",
    "resolve_total",
]
