"""Batch loading by identifier.

``BatchLoader`` turns a list of keys into one data-source query and maps
every key to either a projected view or an ``EntityNotFoundError`` marker.
Request-scoped batching and per-key caching come from strawberry's
``DataLoader``: ``load()`` calls made in the same event loop tick are
collected and dispatched through ``load_keys`` together.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, ClassVar

from strawberry.dataloader import DataLoader

from press_graph.core.exceptions import EntityNotFoundError
from press_graph.core.settings import get_graphql_settings
from press_graph.features.content.projections import EntityView, project

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from press_graph.core.schemas.auth import Requester

logger = logging.getLogger(__name__)

BatchResult = dict[int, EntityView | EntityNotFoundError]


class BatchLoader(ABC):
    """Base class for request-scoped batch loaders.

    Subclasses implement ``fetch`` (one query for many keys) and set
    ``entity_type`` for error messages.

    Usage:
        loader = PostObjectLoader(session, requester)
        post = await loader.load(12)  # Batched with other loads
        results = await loader.load_keys([12, 13, 12])  # {12: PostView, 13: ...}
    """

    entity_type: ClassVar[str] = "entity"

    def __init__(
        self,
        session: AsyncSession,
        requester: Requester | None = None,
        *,
        isolate_errors: bool | None = None,
    ) -> None:
        """Initialize with a database session.

        Args:
            session: AsyncSession scoped to the current request
            requester: Identity used to project loaded records
            isolate_errors: Report missing keys per key (default from
                ``GraphQLSettings.batch_isolate_errors``); when false the
                first missing key aborts the batch.
        """
        self._session = session
        self.requester = requester
        if isolate_errors is None:
            isolate_errors = get_graphql_settings().batch_isolate_errors
        self.isolate_errors = isolate_errors
        self._loader: DataLoader[int, EntityView] = DataLoader(load_fn=self._batch_load)

    @abstractmethod
    async def fetch(self, keys: list[int]) -> dict[int, Any]:
        """Fetch records for ``keys`` in a single query, keyed by id."""

    async def load_keys(self, keys: Iterable[int]) -> BatchResult:
        """Load many keys at once.

        Args:
            keys: Identifiers, possibly repeated.

        Returns:
            Mapping of each distinct key (first-seen order) to its view or an
            ``EntityNotFoundError`` marker.

        Raises:
            EntityNotFoundError: For the first missing key when error
                isolation is disabled.
        """
        unique = list(dict.fromkeys(keys))
        if not unique:
            return {}

        records = await self.fetch(unique)

        results: BatchResult = {}
        missing: list[int] = []
        for key in unique:
            record = records.get(key)
            if record is None:
                error = EntityNotFoundError(self.entity_type, key)
                if not self.isolate_errors:
                    logger.warning(
                        "Batch aborted on missing key",
                        extra={"entity_type": self.entity_type, "key": key, "batch_size": len(unique)},
                    )
                    raise error
                missing.append(key)
                results[key] = error
            else:
                results[key] = project(record, self.requester)

        if missing:
            logger.debug(
                "Batch loaded with missing keys",
                extra={"entity_type": self.entity_type, "missing": missing, "batch_size": len(unique)},
            )
        return results

    async def _batch_load(self, keys: list[int]) -> list[EntityView | BaseException]:
        # DataLoader sets exception values on the matching key's future only
        results = await self.load_keys(keys)
        return [results[key] for key in keys]

    async def load(self, key: int) -> EntityView:
        """Load a single entity, batched with other loads in the same tick.

        Raises:
            EntityNotFoundError: If no record exists for ``key``.
        """
        return await self._loader.load(key)

    async def load_many(self, keys: list[int]) -> list[EntityView]:
        """Load several entities in order.

        Raises:
            EntityNotFoundError: If any of the keys has no record.
        """
        return await self._loader.load_many(keys)

    async def load_optional(self, key: int | None) -> EntityView | None:
        """Load an entity, returning None when the key is empty or missing."""
        if not key:
            return None
        try:
            return await self.load(key)
        except EntityNotFoundError:
            return None


__all__ = ["BatchLoader", "BatchResult"]
