"""Batch loader for users."""

from __future__ import annotations

from typing import Any, ClassVar

from sqlalchemy import select

from press_graph.core.models import User

from .base import BatchLoader


class UserLoader(BatchLoader):
    """Load users by ID (post authors, ``user(id:)`` lookups)."""

    entity_type: ClassVar[str] = "user"

    async def fetch(self, keys: list[int]) -> dict[int, Any]:
        stmt = select(User).where(User.id.in_(keys))
        result = await self._session.execute(stmt)
        return {user.id: user for user in result.scalars().all()}


__all__ = ["UserLoader"]
