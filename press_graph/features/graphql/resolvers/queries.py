"""Root query fields.

Provides:
- post(id) / posts(first, last, after, before, where)
- page(id) / pages(...)
- menuItem(id) / menuItems(...)
- user(id)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated

import strawberry

from press_graph.core.exceptions import EntityNotFoundError
from press_graph.features.content.projections import MENU_ITEM_TYPE
from press_graph.features.graphql.relay import decode_id
from press_graph.features.graphql.resolvers.connections import resolve_post_objects
from press_graph.features.graphql.types.inputs import PostObjectsConnectionWhereArgs
from press_graph.features.graphql.types.menu_items import MenuItemConnection, MenuItemType
from press_graph.features.graphql.types.posts import (
    PAGE_TYPE,
    PageConnection,
    PageType,
    PostConnection,
    PostType,
)
from press_graph.features.graphql.types.users import UserType

from strawberry.types import Info

from press_graph.features.graphql.context import GraphQLContext

if TYPE_CHECKING:
    from press_graph.features.content.projections import EntityView

logger = logging.getLogger(__name__)

POST_TYPE = "post"

# Type aliases for annotated arguments
IdArg = Annotated[strawberry.ID, strawberry.argument(description="Global or database ID")]
FirstArg = Annotated[
    int | None, strawberry.argument(description="Number of items to return (forward pagination)")
]
AfterArg = Annotated[
    str | None, strawberry.argument(description="Cursor to start after (forward pagination)")
]
LastArg = Annotated[
    int | None, strawberry.argument(description="Number of items to return (backward pagination)")
]
BeforeArg = Annotated[
    str | None, strawberry.argument(description="Cursor to end before (backward pagination)")
]
WhereArg = Annotated[
    PostObjectsConnectionWhereArgs | None,
    strawberry.argument(description="Filter the listed post objects"),
]


async def _load_post_object(info: Info[GraphQLContext, None], id: str, post_type: str) -> EntityView:
    view = await info.context.loaders.posts.load(decode_id(id))
    if getattr(view, "post_type", None) != post_type:
        raise EntityNotFoundError(post_type, decode_id(id))
    return view


@strawberry.type
class Query:
    """Root query type."""

    @strawberry.field(description="A single post by ID")
    async def post(self, info: Info[GraphQLContext, None], id: IdArg) -> PostType:
        return PostType(view=await _load_post_object(info, id, POST_TYPE))

    @strawberry.field(description="List posts with cursor pagination")
    async def posts(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        last: LastArg = None,
        after: AfterArg = None,
        before: BeforeArg = None,
        where: WhereArg = None,
    ) -> PostConnection:
        connection = await resolve_post_objects(
            info, POST_TYPE, None, first=first, last=last, after=after, before=before, where=where
        )
        return PostConnection.from_connection(connection)

    @strawberry.field(description="A single page by ID")
    async def page(self, info: Info[GraphQLContext, None], id: IdArg) -> PageType:
        return PageType(view=await _load_post_object(info, id, PAGE_TYPE))

    @strawberry.field(description="List pages with cursor pagination")
    async def pages(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        last: LastArg = None,
        after: AfterArg = None,
        before: BeforeArg = None,
        where: WhereArg = None,
    ) -> PageConnection:
        connection = await resolve_post_objects(
            info, PAGE_TYPE, None, first=first, last=last, after=after, before=before, where=where
        )
        return PageConnection.from_connection(connection)

    @strawberry.field(description="A single menu item by ID")
    async def menu_item(self, info: Info[GraphQLContext, None], id: IdArg) -> MenuItemType:
        view = await info.context.loaders.menu_items.load(decode_id(id))
        return MenuItemType(view=view)

    @strawberry.field(description="List menu items with cursor pagination")
    async def menu_items(
        self,
        info: Info[GraphQLContext, None],
        first: FirstArg = None,
        last: LastArg = None,
        after: AfterArg = None,
        before: BeforeArg = None,
        where: WhereArg = None,
    ) -> MenuItemConnection:
        connection = await resolve_post_objects(
            info, MENU_ITEM_TYPE, None, first=first, last=last, after=after, before=before, where=where
        )
        return MenuItemConnection.from_connection(connection)

    @strawberry.field(description="A single user by ID")
    async def user(self, info: Info[GraphQLContext, None], id: IdArg) -> UserType:
        view = await info.context.loaders.users.load(decode_id(id))
        return UserType(view=view)


__all__ = ["Query"]
