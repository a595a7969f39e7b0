"""Projection of stored records into requester-scoped views.

Each ``EntityView`` wraps a record and decides which of its fields a given
``Requester`` may see. Field resolvers read values through ``view.get(name)``,
which yields ``None`` for fields outside the visible set.

Example:
    view = project(post, Requester.anonymous())
    view.get("title")     # "Hello world"
    view.get("password")  # None
"""

from __future__ import annotations

from typing import Any, ClassVar

from press_graph.core.models import Post, User
from press_graph.core.schemas.auth import Requester, capabilities_for_roles

MENU_ITEM_TYPE = "nav_menu_item"


class EntityView:
    """Base projection.

    Subclasses declare ``public_fields`` (always visible) and
    ``restricted_fields`` (visible only when ``can_view_restricted`` holds).
    """

    entity_type: ClassVar[str] = "entity"
    public_fields: ClassVar[frozenset[str]] = frozenset({"id"})
    restricted_fields: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, record: Any, requester: Requester | None = None) -> None:
        self.record = record
        self.requester = requester or Requester.anonymous()
        self._visible = self.visible_fields(self.requester)

    @property
    def id(self) -> int:
        return self.record.id

    def can_view_restricted(self, requester: Requester) -> bool:
        return False

    def visible_fields(self, requester: Requester) -> frozenset[str]:
        """Fields ``requester`` is allowed to read."""
        if self.can_view_restricted(requester):
            return self.public_fields | self.restricted_fields
        return self.public_fields

    def get(self, field: str, default: Any = None) -> Any:
        """Value of ``field`` when visible, else ``default``."""
        if field not in self._visible:
            return default
        return self.value(field)

    def value(self, field: str) -> Any:
        return getattr(self.record, field, None)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id})>"


class PostView(EntityView):
    """Posts and pages.

    Non-published posts only expose their identity unless the requester is
    the author or may read private posts; the password is only shown to
    editors of the post.
    """

    entity_type = "post"
    public_fields = frozenset(
        {
            "id",
            "post_type",
            "status",
            "title",
            "name",
            "content",
            "excerpt",
            "author_id",
            "parent_id",
            "menu_order",
            "is_sticky",
            "date",
            "modified",
        }
    )
    restricted_fields = frozenset({"password"})

    @property
    def post_type(self) -> str:
        return self.record.post_type

    def can_view_restricted(self, requester: Requester) -> bool:
        if requester.is_user(self.record.author_id):
            return True
        return requester.can("edit_others_posts")

    def visible_fields(self, requester: Requester) -> frozenset[str]:
        if self.record.status != "publish" and not (
            self.can_view_restricted(requester) or requester.can("read_private_posts")
        ):
            return frozenset({"id", "post_type", "status"})
        fields = super().visible_fields(requester)
        if self.record.password and not self.can_view_restricted(requester):
            fields = fields - {"content", "excerpt"}
        return fields


class MenuItemView(PostView):
    """Navigation menu items; menu fields are stored as post meta."""

    entity_type = "menu_item"
    public_fields = frozenset(
        {
            "id",
            "label",
            "title",
            "url",
            "target",
            "css_classes",
            "description",
            "link_relationship",
            "menu_order",
            "parent_id",
            "object_id",
            "object_type",
            "status",
            "post_type",
        }
    )
    restricted_fields = frozenset()

    META_FIELDS: ClassVar[dict[str, str]] = {
        "url": "_menu_item_url",
        "target": "_menu_item_target",
        "link_relationship": "_menu_item_xfn",
        "object_type": "_menu_item_object",
    }

    def visible_fields(self, requester: Requester) -> frozenset[str]:
        return self.public_fields

    def value(self, field: str) -> Any:
        record: Post = self.record
        if field in self.META_FIELDS:
            return record.get_meta(self.META_FIELDS[field]) or None
        if field == "label":
            return record.title or None
        if field == "description":
            return record.content or None
        if field == "css_classes":
            classes = record.get_meta("_menu_item_classes") or ""
            return [name for name in classes.split() if name]
        if field == "parent_id":
            return _int_or_none(record.get_meta("_menu_item_menu_item_parent"))
        if field == "object_id":
            return _int_or_none(record.get_meta("_menu_item_object_id"))
        return super().value(field)


class UserView(EntityView):
    """Users; contact details and roles are visible to the user and to admins."""

    entity_type = "user"
    public_fields = frozenset(
        {
            "id",
            "login",
            "display_name",
            "nicename",
            "first_name",
            "last_name",
            "nickname",
            "description",
            "url",
            "locale",
            "registered",
        }
    )
    restricted_fields = frozenset({"email", "roles", "capabilities"})

    def can_view_restricted(self, requester: Requester) -> bool:
        return requester.is_user(self.record.id) or requester.can("list_users")

    def value(self, field: str) -> Any:
        user: User = self.record
        if field == "capabilities":
            return capabilities_for_roles(user.roles or [])
        if field == "roles":
            return list(user.roles or [])
        return super().value(field)


def _int_or_none(value: str | None) -> int | None:
    try:
        number = int(value) if value else 0
    except ValueError:
        return None
    return number or None


def project(record: Post | User, requester: Requester | None = None) -> EntityView:
    """Wrap a stored record in the view matching its kind."""
    if isinstance(record, User):
        return UserView(record, requester)
    if record.post_type == MENU_ITEM_TYPE:
        return MenuItemView(record, requester)
    return PostView(record, requester)


__all__ = [
    "MENU_ITEM_TYPE",
    "EntityView",
    "MenuItemView",
    "PostView",
    "UserView",
    "project",
]
