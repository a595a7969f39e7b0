"""GraphQL types for users."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Annotated

import strawberry

from press_graph.features.content.projections import UserView
from press_graph.features.graphql.relay import to_global_id
from press_graph.features.graphql.types.inputs import PostObjectsConnectionWhereArgs

from strawberry.types import Info

from press_graph.features.graphql.context import GraphQLContext

if TYPE_CHECKING:
    from press_graph.features.graphql.types.posts import PageConnection, PostConnection


@strawberry.type(name="User", description="A registered user")
class UserType:
    """GraphQL type for users.

    Email, roles and capabilities resolve to null unless the requester is
    the user or may list users.
    """

    view: strawberry.Private[UserView]

    @strawberry.field(description="Global ID")
    def id(self) -> strawberry.ID:
        return to_global_id("user", self.view.id)

    @strawberry.field(description="Database ID")
    def database_id(self) -> int:
        return self.view.id

    @strawberry.field(description="Login name")
    def username(self) -> str | None:
        return self.view.get("login")

    @strawberry.field(description="Display name")
    def name(self) -> str | None:
        return self.view.get("display_name")

    @strawberry.field(description="URL slug")
    def slug(self) -> str | None:
        return self.view.get("nicename")

    @strawberry.field
    def first_name(self) -> str | None:
        return self.view.get("first_name")

    @strawberry.field
    def last_name(self) -> str | None:
        return self.view.get("last_name")

    @strawberry.field
    def nickname(self) -> str | None:
        return self.view.get("nickname")

    @strawberry.field
    def description(self) -> str | None:
        return self.view.get("description")

    @strawberry.field
    def url(self) -> str | None:
        return self.view.get("url")

    @strawberry.field
    def locale(self) -> str | None:
        return self.view.get("locale")

    @strawberry.field
    def registered_date(self) -> datetime | None:
        return self.view.get("registered")

    @strawberry.field
    def email(self) -> str | None:
        return self.view.get("email")

    @strawberry.field
    def roles(self) -> list[str] | None:
        return self.view.get("roles")

    @strawberry.field
    def capabilities(self) -> list[str] | None:
        return self.view.get("capabilities")

    @strawberry.field(description="Posts written by the user")
    async def posts(
        self,
        info: Info[GraphQLContext, None],
        first: int | None = None,
        last: int | None = None,
        after: str | None = None,
        before: str | None = None,
        where: PostObjectsConnectionWhereArgs | None = None,
    ) -> Annotated["PostConnection", strawberry.lazy("press_graph.features.graphql.types.posts")]:
        from press_graph.features.graphql.resolvers.connections import resolve_post_objects
        from press_graph.features.graphql.types.posts import PostConnection

        connection = await resolve_post_objects(
            info, "post", self.view, first=first, last=last, after=after, before=before, where=where
        )
        return PostConnection.from_connection(connection)

    @strawberry.field(description="Pages written by the user")
    async def pages(
        self,
        info: Info[GraphQLContext, None],
        first: int | None = None,
        last: int | None = None,
        after: str | None = None,
        before: str | None = None,
        where: PostObjectsConnectionWhereArgs | None = None,
    ) -> Annotated["PageConnection", strawberry.lazy("press_graph.features.graphql.types.posts")]:
        from press_graph.features.graphql.resolvers.connections import resolve_post_objects
        from press_graph.features.graphql.types.posts import PageConnection

        connection = await resolve_post_objects(
            info, "page", self.view, first=first, last=last, after=after, before=before, where=where
        )
        return PageConnection.from_connection(connection)


__all__ = ["UserType"]
