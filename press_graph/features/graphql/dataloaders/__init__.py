"""DataLoader container and factory.

Batch loaders group ID lookups made while resolving one GraphQL request
into single queries, preventing N+1 query problems.

Each GraphQL request gets its own loader instances so batching windows and
caches never cross request boundaries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .base import BatchLoader, BatchResult
from .menu_items import MenuItemLoader
from .posts import PostObjectLoader
from .users import UserLoader

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from press_graph.core.schemas.auth import Requester


@dataclass
class DataLoaders:
    """Container for all loader instances of one request.

    Usage in resolver:
        ctx = info.context
        item = await ctx.loaders.menu_items.load(menu_item_id)
    """

    posts: PostObjectLoader
    menu_items: MenuItemLoader
    users: UserLoader


def create_dataloaders(session: AsyncSession, requester: Requester | None = None) -> DataLoaders:
    """Factory for creating request-scoped loaders.

    Args:
        session: Database session for the current request
        requester: Identity the loaded records are projected for

    Returns:
        DataLoaders container with all loaders initialized
    """
    return DataLoaders(
        posts=PostObjectLoader(session, requester),
        menu_items=MenuItemLoader(session, requester),
        users=UserLoader(session, requester),
    )


__all__ = [
    "BatchLoader",
    "BatchResult",
    "DataLoaders",
    "MenuItemLoader",
    "PostObjectLoader",
    "UserLoader",
    "create_dataloaders",
]
