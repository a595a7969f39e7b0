"""Batch loader for navigation menu items."""

from __future__ import annotations

from typing import ClassVar

from press_graph.features.content.projections import MENU_ITEM_TYPE

from .posts import PostObjectLoader


class MenuItemLoader(PostObjectLoader):
    """Load ``nav_menu_item`` posts by ID.

    A key that belongs to another post type is reported missing.
    """

    entity_type: ClassVar[str] = MENU_ITEM_TYPE
    post_type: ClassVar[str] = MENU_ITEM_TYPE


__all__ = ["MenuItemLoader"]
