"""Batch loaders for post objects."""

from __future__ import annotations

from typing import Any, ClassVar

from press_graph.features.content import ContentQuery, QueryParams

from .base import BatchLoader


class PostObjectLoader(BatchLoader):
    """Load post objects of any type and status by ID.

    Issues one content query with ``post__in`` set to the batch keys,
    ordered by input order, without counting or sticky handling.
    """

    entity_type: ClassVar[str] = "post"
    post_type: ClassVar[str] = "any"

    def query_params(self, keys: list[int]) -> QueryParams:
        return QueryParams(
            post_type=self.post_type,
            post_status="any",
            posts_per_page=len(keys),
            post__in=list(keys),
            orderby="post__in",
            no_found_rows=True,
            ignore_sticky_posts=True,
        )

    async def fetch(self, keys: list[int]) -> dict[int, Any]:
        result = await ContentQuery(self._session).execute(self.query_params(keys))
        return {record.id: record for record in result.records}


__all__ = ["PostObjectLoader"]
