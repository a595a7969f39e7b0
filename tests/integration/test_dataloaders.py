"""Integration tests for request-scoped batch loaders."""
from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest

from press_graph.core.exceptions import EntityNotFoundError
from press_graph.core.schemas.auth import Requester
from press_graph.features.content import MenuItemView, PostView, UserView
from press_graph.features.graphql.dataloaders import (
    MenuItemLoader,
    PostObjectLoader,
    UserLoader,
    create_dataloaders,
)


class CountingPostLoader(PostObjectLoader):
    """Records every batch passed to ``fetch``."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.batches: list[list[int]] = []

    async def fetch(self, keys):
        self.batches.append(list(keys))
        return await super().fetch(keys)


class TestLoadKeys:
    async def test_deduplicates_and_preserves_order(self, db_session, content):
        first, second = content.post_ids[2], content.post_ids[0]
        loader = CountingPostLoader(db_session)

        results = await loader.load_keys([first, second, first])

        assert list(results) == [first, second]
        assert all(isinstance(view, PostView) for view in results.values())
        assert loader.batches == [[first, second]]

    async def test_empty_keys_skip_query(self):
        session = AsyncMock()
        loader = PostObjectLoader(session)

        assert await loader.load_keys([]) == {}
        session.execute.assert_not_called()

    async def test_missing_key_gets_marker_with_isolation(self, db_session, content):
        loader = PostObjectLoader(db_session, isolate_errors=True)

        results = await loader.load_keys([content.post_ids[0], 999])

        assert isinstance(results[content.post_ids[0]], PostView)
        marker = results[999]
        assert isinstance(marker, EntityNotFoundError)
        assert marker.detail == "No post exists with id: 999"

    async def test_missing_key_raises_by_default(self, db_session, content):
        loader = PostObjectLoader(db_session)

        with pytest.raises(EntityNotFoundError, match="999"):
            await loader.load_keys([content.post_ids[0], 999])

    async def test_loads_any_status(self, db_session, content):
        results = await PostObjectLoader(db_session).load_keys([content.draft.id])

        assert isinstance(results[content.draft.id], PostView)

    async def test_views_projected_for_requester(self, db_session, content):
        anonymous = await PostObjectLoader(db_session).load_keys([content.draft.id])
        owner = await PostObjectLoader(
            db_session, Requester.for_user(content.other_author.id, ["contributor"])
        ).load_keys([content.draft.id])

        assert anonymous[content.draft.id].get("title") is None
        assert owner[content.draft.id].get("title") == "Draft"


class TestLoad:
    async def test_concurrent_loads_share_one_batch(self, db_session, content):
        a, b = content.post_ids[:2]
        loader = CountingPostLoader(db_session)

        views = await asyncio.gather(loader.load(a), loader.load(b), loader.load(a))

        assert [view.id for view in views] == [a, b, a]
        assert loader.batches == [[a, b]]

    async def test_repeated_load_is_cached(self, db_session, content):
        loader = CountingPostLoader(db_session)

        await loader.load(content.post_ids[0])
        await loader.load(content.post_ids[0])

        assert len(loader.batches) == 1

    async def test_missing_key_fails_only_its_load_with_isolation(self, db_session, content):
        loader = PostObjectLoader(db_session, isolate_errors=True)

        found, missing = await asyncio.gather(
            loader.load(content.post_ids[0]), loader.load(999), return_exceptions=True
        )

        assert isinstance(found, PostView)
        assert isinstance(missing, EntityNotFoundError)

    async def test_missing_key_fails_whole_batch_by_default(self, db_session, content):
        loader = PostObjectLoader(db_session)

        results = await asyncio.gather(
            loader.load(content.post_ids[0]), loader.load(999), return_exceptions=True
        )

        assert all(isinstance(result, EntityNotFoundError) for result in results)

    async def test_load_many(self, db_session, content):
        views = await PostObjectLoader(db_session).load_many(content.post_ids[:3])

        assert [view.id for view in views] == content.post_ids[:3]

    async def test_load_optional(self, db_session, content):
        loader = PostObjectLoader(db_session)

        assert await loader.load_optional(None) is None
        assert await loader.load_optional(0) is None
        assert await loader.load_optional(999) is None
        assert (await loader.load_optional(content.post_ids[0])).id == content.post_ids[0]


class TestMenuItemLoader:
    async def test_loads_menu_items(self, db_session, content):
        home = content.menu_items[0]

        view = await MenuItemLoader(db_session).load(home.id)

        assert isinstance(view, MenuItemView)
        assert view.get("url") == "https://example.com/"

    async def test_other_post_types_are_missing(self, db_session, content):
        with pytest.raises(EntityNotFoundError) as exc_info:
            await MenuItemLoader(db_session).load(content.post_ids[0])

        assert exc_info.value.detail == f"No nav_menu_item exists with id: {content.post_ids[0]}"


class TestUserLoader:
    async def test_loads_users(self, db_session, content):
        views = await UserLoader(db_session).load_many([content.author.id, content.admin.id])

        assert all(isinstance(view, UserView) for view in views)
        assert [view.get("login") for view in views] == ["alice", "root"]

    async def test_missing_user(self, db_session, content):
        with pytest.raises(EntityNotFoundError, match="No user exists with id: 999"):
            await UserLoader(db_session).load(999)


async def test_create_dataloaders_shares_requester(db_session):
    requester = Requester.for_user(1, ["author"])

    loaders = create_dataloaders(db_session, requester)

    assert loaders.posts.requester is requester
    assert loaders.menu_items.requester is requester
    assert loaders.users.requester is requester
