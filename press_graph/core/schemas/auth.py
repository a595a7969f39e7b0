"""Requester schema used for field visibility decisions.

A ``Requester`` is resolved once per GraphQL request and handed to the
projection layer; roles expand to capabilities through ``ROLE_CAPABILITIES``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

ROLE_CAPABILITIES: dict[str, tuple[str, ...]] = {
    "administrator": (
        "read",
        "level_0",
        "edit_posts",
        "edit_others_posts",
        "publish_posts",
        "read_private_posts",
        "edit_pages",
        "list_users",
        "edit_users",
        "manage_options",
    ),
    "editor": (
        "read",
        "level_0",
        "edit_posts",
        "edit_others_posts",
        "publish_posts",
        "read_private_posts",
        "edit_pages",
    ),
    "author": ("read", "level_0", "edit_posts", "publish_posts"),
    "contributor": ("read", "level_0", "edit_posts"),
    "subscriber": ("read", "level_0"),
}


def capabilities_for_roles(roles: list[str]) -> list[str]:
    """Expand role names into their capability list.

    Role names themselves are included, as WordPress does for ``allcaps``.

    Example:
        >>> capabilities_for_roles(["subscriber"])
        ['read', 'level_0', 'subscriber']
    """
    caps: dict[str, None] = {}
    for role in roles:
        caps.update(dict.fromkeys(ROLE_CAPABILITIES.get(role, ())))
        caps[role] = None
    return list(caps)


class Requester(BaseModel):
    """The identity a GraphQL request runs as.

    Anonymous requesters have no ``user_id`` and no capabilities.
    """

    user_id: int | None = Field(default=None, ge=1, description="Requesting user ID")
    roles: list[str] = Field(default_factory=list, description="Role names")
    capabilities: frozenset[str] = Field(
        default_factory=frozenset, description="Granted capabilities"
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def anonymous(cls) -> Requester:
        """Requester with no identity."""
        return cls()

    @classmethod
    def for_user(cls, user_id: int, roles: list[str]) -> Requester:
        """Build a requester for a known user from its roles."""
        return cls(
            user_id=user_id,
            roles=list(roles),
            capabilities=frozenset(capabilities_for_roles(roles)),
        )

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def can(self, capability: str) -> bool:
        """Check whether the requester holds a capability."""
        return capability in self.capabilities

    def is_user(self, user_id: int | None) -> bool:
        """Check whether the requester is the given user."""
        return self.user_id is not None and self.user_id == user_id


__all__ = ["ROLE_CAPABILITIES", "Requester", "capabilities_for_roles"]
