"""Shared resolution for post-object connection fields."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import strawberry

from press_graph.features.graphql.connection import PaginationArgs
from press_graph.features.graphql.selection import is_field_selected

from strawberry.types import Info

from press_graph.features.graphql.context import GraphQLContext

if TYPE_CHECKING:
    from press_graph.core.pagination import Connection
    from press_graph.features.graphql.types.inputs import PostObjectsConnectionWhereArgs

logger = logging.getLogger(__name__)


def where_to_mapping(where: PostObjectsConnectionWhereArgs | None) -> dict[str, Any] | None:
    """Snake_case mapping of a ``where`` input, or None when not given."""
    if where is None:
        return None
    return strawberry.asdict(where)


async def resolve_post_objects(
    info: Info[GraphQLContext, None],
    post_type: str | list[str],
    source: Any,
    *,
    first: int | None = None,
    last: int | None = None,
    after: str | None = None,
    before: str | None = None,
    where: PostObjectsConnectionWhereArgs | None = None,
) -> Connection[Any]:
    """Resolve a post-object connection field with the request's resolver.

    Args:
        info: Strawberry info (context, selection).
        post_type: Post type(s) the field lists.
        source: Parent view, if the field hangs off another type.
        first: Forward page size.
        last: Backward page size.
        after: Forward cursor.
        before: Backward cursor.
        where: Filter input.

    Returns:
        Core connection of projected views.
    """
    ctx = info.context
    args = PaginationArgs(
        first=first,
        last=last,
        after=after,
        before=before,
        where=where_to_mapping(where),
    )
    request_context = ctx.request_context(page_info_selected=is_field_selected(info, "pageInfo"))
    return await ctx.connections.resolve(post_type, source, args, request_context)


__all__ = ["resolve_post_objects", "where_to_mapping"]
