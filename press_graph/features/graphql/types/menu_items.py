"""GraphQL types for navigation menu items."""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from press_graph.features.content.projections import MenuItemView
from press_graph.features.graphql.relay import to_global_id
from press_graph.features.graphql.types.base import PageInfoType

from strawberry.types import Info

from press_graph.features.graphql.context import GraphQLContext

if TYPE_CHECKING:
    from press_graph.core.pagination import Connection


@strawberry.type(name="MenuItem", description="An item of a navigation menu")
class MenuItemType:
    view: strawberry.Private[MenuItemView]

    @strawberry.field(description="Global ID")
    def id(self) -> strawberry.ID:
        return to_global_id("nav_menu_item", self.view.id)

    @strawberry.field(description="Database ID")
    def database_id(self) -> int:
        return self.view.id

    @strawberry.field(description="Link text")
    def label(self) -> str | None:
        return self.view.get("label")

    @strawberry.field(description="Link target URL")
    def url(self) -> str | None:
        return self.view.get("url")

    @strawberry.field(description="Link target attribute (e.g. _blank)")
    def target(self) -> str | None:
        return self.view.get("target")

    @strawberry.field(description="CSS classes of the item")
    def css_classes(self) -> list[str]:
        return self.view.get("css_classes") or []

    @strawberry.field
    def description(self) -> str | None:
        return self.view.get("description")

    @strawberry.field(description="Link rel attribute")
    def link_relationship(self) -> str | None:
        return self.view.get("link_relationship")

    @strawberry.field(description="Position within the menu")
    def menu_order(self) -> int | None:
        return self.view.get("menu_order")

    @strawberry.field(description="ID of the object the item links to")
    def object_id(self) -> int | None:
        return self.view.get("object_id")

    @strawberry.field(description="Type of the object the item links to")
    def object_type(self) -> str | None:
        return self.view.get("object_type")

    @strawberry.field(description="Parent menu item, for nested menus")
    async def parent(self, info: Info[GraphQLContext, None]) -> MenuItemType | None:
        view = await info.context.loaders.menu_items.load_optional(self.view.get("parent_id"))
        return MenuItemType(view=view) if view else None


@strawberry.type(name="MenuItemEdge", description="Edge containing a menu item and its cursor")
class MenuItemEdge:
    node: MenuItemType = strawberry.field(description="The menu item")
    cursor: str = strawberry.field(description="Cursor for this menu item")


@strawberry.type(name="MenuItemConnection", description="Paginated list of menu items")
class MenuItemConnection:
    edges: list[MenuItemEdge] = strawberry.field(description="List of menu item edges")
    page_info: PageInfoType = strawberry.field(description="Pagination information")

    @strawberry.field(description="The menu items, without edges")
    def nodes(self) -> list[MenuItemType]:
        return [edge.node for edge in self.edges]

    @classmethod
    def from_connection(cls, connection: Connection) -> MenuItemConnection:
        return cls(
            edges=[
                MenuItemEdge(node=MenuItemType(view=edge.node), cursor=edge.cursor)
                for edge in connection.edges
            ],
            page_info=PageInfoType.from_page_info(connection.page_info),
        )


__all__ = ["MenuItemConnection", "MenuItemEdge", "MenuItemType"]
