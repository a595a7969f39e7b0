"""Strawberry GraphQL types."""

from .base import PageInfoType
from .menu_items import MenuItemConnection, MenuItemEdge, MenuItemType
from .posts import (
    PageConnection,
    PageEdge,
    PageType,
    PostConnection,
    PostEdge,
    PostObject,
    PostType,
    post_object_type,
)
from .users import UserType

__all__ = [
    "MenuItemConnection",
    "MenuItemEdge",
    "MenuItemType",
    "PageConnection",
    "PageEdge",
    "PageInfoType",
    "PageType",
    "PostConnection",
    "PostEdge",
    "PostObject",
    "PostType",
    "UserType",
    "post_object_type",
]
