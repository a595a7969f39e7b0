"""Integration tests for post-object connection resolution."""
from __future__ import annotations

import pytest

from press_graph.core.exceptions import EmptyResultError
from press_graph.core.pagination import CursorCodec
from press_graph.core.schemas.auth import Requester
from press_graph.core.settings.graphql import GraphQLSettings
from press_graph.features.content import PostView, UserView
from press_graph.features.graphql.connection import (
    PaginationArgs,
    PostObjectsConnectionResolver,
    RequestContext,
)


@pytest.fixture
def resolver() -> PostObjectsConnectionResolver:
    return PostObjectsConnectionResolver(settings=GraphQLSettings())


@pytest.fixture
def request_context(db_session) -> RequestContext:
    return RequestContext(session=db_session)


def node_ids(connection) -> list[int]:
    return [node.id for node in connection.nodes]


def offsets(connection) -> list[int]:
    return [CursorCodec.decode(edge.cursor) for edge in connection.edges]


class TestForward:
    async def test_first_page(self, resolver, request_context, content):
        connection = await resolver.resolve("post", None, PaginationArgs(first=2), request_context)

        assert node_ids(connection) == content.post_ids[:2]
        assert offsets(connection) == [0, 1]
        assert connection.page_info.has_next_page is True
        assert connection.page_info.has_previous_page is False
        assert connection.page_info.total_count == 5
        assert all(isinstance(node, PostView) for node in connection.nodes)

    async def test_follow_end_cursor(self, resolver, request_context, content):
        first = await resolver.resolve("post", None, PaginationArgs(first=2), request_context)
        second = await resolver.resolve(
            "post",
            None,
            PaginationArgs(first=2, after=first.page_info.end_cursor),
            request_context,
        )

        assert node_ids(second) == content.post_ids[2:4]
        assert offsets(second) == [2, 3]
        assert second.page_info.has_next_page is True

    async def test_final_page(self, resolver, request_context, content):
        connection = await resolver.resolve(
            "post", None, PaginationArgs(first=2, after=CursorCodec.encode(3)), request_context
        )

        assert node_ids(connection) == content.post_ids[4:]
        assert connection.page_info.has_next_page is False

    async def test_pages_cover_set_without_overlap(self, resolver, request_context, content):
        seen: list[int] = []
        after = None
        for _ in range(5):
            connection = await resolver.resolve(
                "post", None, PaginationArgs(first=2, after=after), request_context
            )
            seen.extend(node_ids(connection))
            if not connection.page_info.has_next_page:
                break
            after = connection.page_info.end_cursor

        assert seen == content.post_ids

    async def test_no_arguments_skips_count(self, resolver, request_context, content):
        connection = await resolver.resolve("post", None, PaginationArgs(), request_context)

        assert node_ids(connection) == content.post_ids
        assert connection.page_info.total_count is None
        assert connection.page_info.has_next_page is False

    async def test_page_info_selection_forces_count(self, resolver, db_session, content):
        connection = await resolver.resolve(
            "post", None, PaginationArgs(), RequestContext(session=db_session, page_info_selected=True)
        )

        assert connection.page_info.total_count == 5


class TestBackward:
    async def test_last_without_before(self, resolver, request_context, content):
        connection = await resolver.resolve("post", None, PaginationArgs(last=2), request_context)

        assert node_ids(connection) == content.post_ids[3:]
        assert offsets(connection) == [3, 4]
        assert connection.page_info.has_previous_page is True
        assert connection.page_info.has_next_page is False

    async def test_last_before(self, resolver, request_context, content):
        connection = await resolver.resolve(
            "post", None, PaginationArgs(last=2, before=CursorCodec.encode(3)), request_context
        )

        assert node_ids(connection) == content.post_ids[1:3]
        assert offsets(connection) == [1, 2]
        assert connection.page_info.has_previous_page is True

    async def test_last_before_reaching_start(self, resolver, request_context, content):
        connection = await resolver.resolve(
            "post", None, PaginationArgs(last=3, before=CursorCodec.encode(1)), request_context
        )

        assert node_ids(connection) == content.post_ids[:1]
        assert connection.page_info.has_previous_page is False

    async def test_last_larger_than_set(self, resolver, request_context, content):
        connection = await resolver.resolve("post", None, PaginationArgs(last=50), request_context)

        assert node_ids(connection) == content.post_ids
        assert offsets(connection) == [0, 1, 2, 3, 4]
        assert connection.page_info.has_previous_page is False


class TestFilteringAndSources:
    async def test_where(self, resolver, request_context, content):
        connection = await resolver.resolve(
            "post", None, PaginationArgs(first=10, where={"category_name": "sports"}), request_context
        )

        assert node_ids(connection) == content.post_ids[3:]
        assert connection.page_info.total_count == 2

    async def test_tax_array_terms_without_field(self, resolver, request_context, content):
        where = {
            "tax_query": {"tax_array": [{"taxonomy": "category", "terms": ["news", str(content.news.id)]}]}
        }

        connection = await resolver.resolve(
            "post", None, PaginationArgs(first=10, where=where), request_context
        )

        assert node_ids(connection) == content.post_ids[:3]

    async def test_tax_array_slug_terms_match_nothing_as_ids(self, resolver, request_context, content):
        where = {"tax_query": {"tax_array": [{"taxonomy": "category", "terms": ["news"]}]}}

        with pytest.raises(EmptyResultError):
            await resolver.resolve(
                "post", None, PaginationArgs(first=10, where=where), request_context
            )

    async def test_user_source(self, resolver, request_context, content):
        source = UserView(content.other_author)

        connection = await resolver.resolve("page", source, PaginationArgs(first=10), request_context)

        assert node_ids(connection) == [content.pages[1].id]

    async def test_nodes_projected_for_requester(self, resolver, db_session, content):
        editor = Requester.for_user(content.other_author.id, ["editor"])
        context = RequestContext(session=db_session, requester=editor)

        connection = await resolver.resolve(
            "post", None, PaginationArgs(first=1, where={"status": "draft"}), context
        )

        assert node_ids(connection) == [content.draft.id]
        assert connection.nodes[0].get("title") == "Draft"


@pytest.fixture
def lenient_resolver() -> PostObjectsConnectionResolver:
    return PostObjectsConnectionResolver(settings=GraphQLSettings(empty_connection_error=False))


class TestEmptyResults:
    async def test_empty_result_error_by_default(self, resolver, request_context, content):
        with pytest.raises(EmptyResultError) as exc_info:
            await resolver.resolve(
                "post", None, PaginationArgs(first=5, where={"author": 9999}), request_context
            )

        assert exc_info.value.type == "empty-result"

    async def test_after_past_end_raises_by_default(self, resolver, request_context, content):
        with pytest.raises(EmptyResultError):
            await resolver.resolve(
                "post", None, PaginationArgs(first=2, after=CursorCodec.encode(10)), request_context
            )

    async def test_empty_connection_when_disabled(self, lenient_resolver, request_context, content):
        connection = await lenient_resolver.resolve(
            "post", None, PaginationArgs(first=5, where={"author": 9999}), request_context
        )

        assert connection.edges == []
        assert connection.page_info.has_next_page is False
        assert connection.page_info.has_previous_page is False
        assert connection.page_info.start_cursor is None
        assert connection.page_info.total_count == 0

    async def test_after_past_end_when_disabled(self, lenient_resolver, request_context, content):
        connection = await lenient_resolver.resolve(
            "post", None, PaginationArgs(first=2, after=CursorCodec.encode(10)), request_context
        )

        assert connection.edges == []
