"""Base GraphQL types for pagination and common patterns.

Provides Relay-compliant pagination types that mirror the core pagination
schemas as Strawberry GraphQL types.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from press_graph.core.pagination import PageInfo


@strawberry.type(name="PageInfo", description="Pagination metadata following GraphQL Relay specification")
class PageInfoType:
    """GraphQL Relay PageInfo for cursor-based pagination.

    Mirrors press_graph.core.pagination.schemas.PageInfo.
    """

    has_previous_page: bool = strawberry.field(description="Whether previous items exist")
    has_next_page: bool = strawberry.field(description="Whether more items exist")
    start_cursor: str | None = strawberry.field(
        default=None,
        description="Cursor of the first item",
    )
    end_cursor: str | None = strawberry.field(
        default=None,
        description="Cursor of the last item",
    )
    total_count: int | None = strawberry.field(
        default=None,
        description="Total number of matching items, when it was computed",
    )

    @classmethod
    def from_page_info(cls, page_info: PageInfo) -> PageInfoType:
        return cls(
            has_previous_page=page_info.has_previous_page,
            has_next_page=page_info.has_next_page,
            start_cursor=page_info.start_cursor,
            end_cursor=page_info.end_cursor,
            total_count=page_info.total_count,
        )


__all__ = ["PageInfoType"]
