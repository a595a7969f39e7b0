"""Relay connection response schemas.

``Connection`` / ``Edge`` / ``PageInfo`` are the transport-neutral result of
connection resolution; the GraphQL layer maps them onto strawberry types.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PageInfo(BaseModel):
    """Pagination metadata following the GraphQL Relay specification.

    Attributes:
        has_previous_page: Whether there are items before the current page
        has_next_page: Whether there are items after the current page
        start_cursor: Cursor of the first item in this page
        end_cursor: Cursor of the last item in this page
        total_count: Total number of matching items, when it was computed
    """

    has_previous_page: bool = Field(default=False, description="Whether previous items exist")
    has_next_page: bool = Field(default=False, description="Whether more items exist")
    start_cursor: str | None = Field(default=None, description="Cursor of the first item")
    end_cursor: str | None = Field(default=None, description="Cursor of the last item")
    total_count: int | None = Field(default=None, description="Total count (optional)")


class Edge(BaseModel, Generic[T]):
    """Edge wrapper pairing a node with its cursor."""

    node: T = Field(description="The data item")
    cursor: str = Field(description="Cursor for this item")

    model_config = ConfigDict(arbitrary_types_allowed=True)


class Connection(BaseModel, Generic[T]):
    """Relay connection: ordered edges plus page info.

    Attributes:
        edges: List of Edge objects containing nodes and cursors
        page_info: Navigation metadata
    """

    edges: list[Edge[T]] = Field(default_factory=list, description="List of edges")
    page_info: PageInfo = Field(default_factory=PageInfo, description="Pagination metadata")

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def nodes(self) -> list[T]:
        """Get just the nodes without edge wrappers."""
        return [edge.node for edge in self.edges]

    @classmethod
    def empty(cls, total_count: int | None = None) -> Connection[T]:
        """A connection with no edges and both page flags false."""
        return cls(edges=[], page_info=PageInfo(total_count=total_count))


__all__ = ["Connection", "Edge", "PageInfo"]
