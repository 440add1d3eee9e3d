"""Pagination schemas for offset-backed Relay connections.

Connection arguments arrive in Relay form (first/after, last/before), the
backend speaks offset/limit, and results travel back as a Connection:

    ConnectionArgs -> PageParams -> backend -> ArraySlice -> Connection

Extension fields (aggregations, counts) ride on a Connection as pydantic
extras so they serialize at the top level next to ``edges`` and
``page_info``.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field

T = TypeVar("T")


class ConnectionArgs(BaseModel):
    """Relay connection arguments.

    Forward pagination uses ``first``/``after``; backward pagination uses
    ``last``/``before``. Values are validated later by the page resolver so
    that bad input surfaces as a pagination error rather than a schema one.
    """

    first: int | None = Field(default=None, description="Number of items from the start")
    after: str | None = Field(default=None, description="Cursor to start after (exclusive)")
    last: int | None = Field(default=None, description="Number of items from the end")
    before: str | None = Field(default=None, description="Cursor to end before (exclusive)")

    model_config = ConfigDict(frozen=True)

    @property
    def is_forward(self) -> bool:
        """Whether forward arguments are present."""
        return self.first is not None or self.after is not None

    @property
    def is_backward(self) -> bool:
        """Whether backward arguments are present."""
        return self.last is not None or self.before is not None


class PageParams(BaseModel):
    """Offset/limit window understood by the backend."""

    limit: int = Field(ge=0, description="Maximum number of items to fetch")
    offset: int = Field(ge=0, description="Index of the first item to fetch")

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def page(self) -> int:
        """1-based page number for backends that page instead of offsetting."""
        if self.limit == 0:
            return 1
        return self.offset // self.limit + 1


class ArraySlice(BaseModel, Generic[T]):
    """A window of an ordered result set as reported by the backend.

    Attributes:
        items: The fetched items, in order
        array_length: Total number of items in the full result set
        slice_start: Absolute index of ``items[0]``
    """

    items: list[T] = Field(default_factory=list)
    array_length: int = Field(ge=0)
    slice_start: int = Field(default=0, ge=0)

    @property
    def slice_end(self) -> int:
        """Absolute index just past the last item."""
        return self.slice_start + len(self.items)

    @property
    def is_consistent(self) -> bool:
        """Whether the reported window fits inside the reported length."""
        return self.slice_end <= self.array_length


class PageInfo(BaseModel):
    """Pagination metadata following GraphQL Relay specification.

    Attributes:
        has_previous_page: Whether there are items before the current page
        has_next_page: Whether there are items after the current page
        start_cursor: Cursor of the first item in this page
        end_cursor: Cursor of the last item in this page
        total_count: Total number of items in the full result set
    """

    has_previous_page: bool = Field(description="Whether previous items exist")
    has_next_page: bool = Field(description="Whether more items exist")
    start_cursor: str | None = Field(default=None, description="Cursor of the first item")
    end_cursor: str | None = Field(default=None, description="Cursor of the last item")
    total_count: int | None = Field(default=None, description="Total count")


class Edge(BaseModel, Generic[T]):
    """Edge wrapper for paginated items (Relay pattern)."""

    node: T = Field(description="The data item")
    cursor: str = Field(description="Cursor for this item")


class Connection(BaseModel, Generic[T]):
    """GraphQL Connection built from an offset-based slice.

    Any extra keyword (``aggregations``, ``counts``...) is kept as a
    top-level extension field and exposed through ``extensions``.
    """

    edges: list[Edge[T]] = Field(
        default_factory=list,
        description="List of edges (items with cursors)",
    )
    page_info: PageInfo = Field(description="Pagination metadata")

    model_config = ConfigDict(extra="allow")

    @property
    def nodes(self) -> list[T]:
        """Get just the nodes without edge wrappers."""
        return [edge.node for edge in self.edges]

    @property
    def extensions(self) -> dict[str, Any]:
        """Extension fields merged next to edges and page_info."""
        return dict(self.model_extra or {})


__all__ = [
    "ArraySlice",
    "Connection",
    "ConnectionArgs",
    "Edge",
    "PageInfo",
    "PageParams",
]
