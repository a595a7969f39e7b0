"""GraphQL types for posts and pages.

Provides:
- PostObject: interface shared by posts and pages
- PostType / PageType: the concrete post object types
- Connection types: PostEdge, PostConnection, PageEdge, PageConnection
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Annotated

import strawberry

from press_graph.features.content.projections import EntityView, PostView
from press_graph.features.graphql.relay import to_global_id
from press_graph.features.graphql.types.base import PageInfoType

from strawberry.types import Info

from press_graph.features.graphql.context import GraphQLContext

if TYPE_CHECKING:
    from press_graph.core.pagination import Connection
    from press_graph.features.graphql.types.users import UserType

PAGE_TYPE = "page"


@strawberry.interface(name="PostObject", description="Fields shared by every post object")
class PostObject:
    view: strawberry.Private[PostView]

    @strawberry.field(description="Global ID")
    def id(self) -> strawberry.ID:
        return to_global_id(self.view.post_type, self.view.id)

    @strawberry.field(description="Database ID")
    def database_id(self) -> int:
        return self.view.id

    @strawberry.field
    def title(self) -> str | None:
        return self.view.get("title")

    @strawberry.field(description="URL slug")
    def slug(self) -> str | None:
        return self.view.get("name")

    @strawberry.field
    def content(self) -> str | None:
        return self.view.get("content")

    @strawberry.field
    def excerpt(self) -> str | None:
        return self.view.get("excerpt")

    @strawberry.field
    def status(self) -> str | None:
        return self.view.get("status")

    @strawberry.field(description="Post password; visible to the author and editors")
    def password(self) -> str | None:
        return self.view.get("password") or None

    @strawberry.field(description="Publication date (site-local time)")
    def date(self) -> datetime | None:
        return self.view.get("date")

    @strawberry.field(description="Last modification date (site-local time)")
    def modified(self) -> datetime | None:
        return self.view.get("modified")

    @strawberry.field
    def menu_order(self) -> int | None:
        return self.view.get("menu_order")

    @strawberry.field(description="The author of the post object")
    async def author(
        self, info: Info[GraphQLContext, None]
    ) -> Annotated["UserType", strawberry.lazy("press_graph.features.graphql.types.users")] | None:
        from press_graph.features.graphql.types.users import UserType

        view = await info.context.loaders.users.load_optional(self.view.get("author_id"))
        return UserType(view=view) if view else None

    @strawberry.field(description="Parent post object, if any")
    async def parent(self, info: Info[GraphQLContext, None]) -> PostObject | None:
        view = await info.context.loaders.posts.load_optional(self.view.get("parent_id"))
        return post_object_type(view) if view else None


@strawberry.type(name="Post", description="A blog post")
class PostType(PostObject):
    @strawberry.field(description="Whether the post is pinned to the top of lists")
    def is_sticky(self) -> bool:
        return bool(self.view.get("is_sticky"))


@strawberry.type(name="Page", description="A static page")
class PageType(PostObject):
    pass


def post_object_type(view: EntityView) -> PostType | PageType:
    """Wrap a post view in the GraphQL type matching its post type."""
    if getattr(view, "post_type", None) == PAGE_TYPE:
        return PageType(view=view)
    return PostType(view=view)


# --- Connection Types ---


@strawberry.type(name="PostEdge", description="Edge containing a post and its cursor")
class PostEdge:
    node: PostType = strawberry.field(description="The post")
    cursor: str = strawberry.field(description="Cursor for this post")


@strawberry.type(name="PostConnection", description="Paginated list of posts")
class PostConnection:
    edges: list[PostEdge] = strawberry.field(description="List of post edges")
    page_info: PageInfoType = strawberry.field(description="Pagination information")

    @strawberry.field(description="The posts, without edges")
    def nodes(self) -> list[PostType]:
        return [edge.node for edge in self.edges]

    @classmethod
    def from_connection(cls, connection: Connection) -> PostConnection:
        return cls(
            edges=[PostEdge(node=PostType(view=edge.node), cursor=edge.cursor) for edge in connection.edges],
            page_info=PageInfoType.from_page_info(connection.page_info),
        )


@strawberry.type(name="PageEdge", description="Edge containing a page and its cursor")
class PageEdge:
    node: PageType = strawberry.field(description="The page")
    cursor: str = strawberry.field(description="Cursor for this page")


@strawberry.type(name="PageConnection", description="Paginated list of pages")
class PageConnection:
    edges: list[PageEdge] = strawberry.field(description="List of page edges")
    page_info: PageInfoType = strawberry.field(description="Pagination information")

    @strawberry.field(description="The pages, without edges")
    def nodes(self) -> list[PageType]:
        return [edge.node for edge in self.edges]

    @classmethod
    def from_connection(cls, connection: Connection) -> PageConnection:
        return cls(
            edges=[PageEdge(node=PageType(view=edge.node), cursor=edge.cursor) for edge in connection.edges],
            page_info=PageInfoType.from_page_info(connection.page_info),
        )


__all__ = [
    "PageConnection",
    "PageEdge",
    "PageType",
    "PostConnection",
    "PostEdge",
    "PostObject",
    "PostType",
    "post_object_type",
]
