"""Unit tests for mapping pagination arguments onto a query window."""
from __future__ import annotations

import pytest

from press_graph.core.exceptions import ArgumentConflictError
from press_graph.core.pagination import CursorCodec
from press_graph.core.settings.graphql import GraphQLSettings
from press_graph.features.content import UserView
from press_graph.features.graphql.arguments import QueryArgumentTranslator
from press_graph.features.graphql.connection import (
    PaginationArgs,
    PostObjectsConnectionResolver,
    RequestContext,
)


@pytest.fixture
def resolver() -> PostObjectsConnectionResolver:
    return PostObjectsConnectionResolver(settings=GraphQLSettings(default_page_size=10, max_page_size=20))


class TestArgumentConflicts:
    def test_after_and_before(self, resolver):
        args = PaginationArgs(after=CursorCodec.encode(1), before=CursorCodec.encode(5))

        with pytest.raises(ArgumentConflictError) as exc_info:
            resolver.plan(args)
        assert exc_info.value.detail == '"Before" and "After" should not be used together in arguments.'

    def test_first_and_last(self, resolver):
        with pytest.raises(ArgumentConflictError) as exc_info:
            resolver.plan(PaginationArgs(first=2, last=2))
        assert exc_info.value.detail == '"First" and "Last" should not be used together in arguments.'

    def test_zero_first_is_unset(self, resolver):
        plan = resolver.plan(PaginationArgs(first=0, last=2))

        assert plan.last == 2
        assert plan.first is None

    def test_empty_cursor_strings_are_unset(self, resolver):
        plan = resolver.plan(PaginationArgs(first=2, after="", before=""))

        assert plan.offset == 0
        assert plan.after is None
        assert plan.before is None


class TestForwardPlans:
    def test_no_arguments_uses_default_page_size(self, resolver):
        plan = resolver.plan(PaginationArgs())

        assert plan.first == 10
        assert plan.posts_per_page == 10
        assert plan.offset == 0
        assert plan.order == "DESC"
        assert plan.reverse is False

    def test_first_is_capped(self, resolver):
        assert resolver.plan(PaginationArgs(first=500)).posts_per_page == 20

    def test_negative_first_is_unset(self, resolver):
        assert resolver.plan(PaginationArgs(first=-4)).posts_per_page == 10

    def test_after_starts_past_cursor(self, resolver):
        plan = resolver.plan(PaginationArgs(first=5, after=CursorCodec.encode(9)))

        assert plan.offset == 10
        assert plan.paged == 2
        assert plan.after == CursorCodec.encode(9)

    def test_invalid_after_cursor_acts_as_offset_zero(self, resolver):
        plan = resolver.plan(PaginationArgs(first=5, after="garbage"))

        assert plan.offset == 1
        assert plan.after == "garbage"

    def test_first_with_before(self, resolver):
        plan = resolver.plan(PaginationArgs(first=3, before=CursorCodec.encode(7)))

        assert plan.offset == 0
        assert plan.posts_per_page == 3
        assert plan.before == CursorCodec.encode(7)


class TestBackwardPlans:
    def test_last_before(self, resolver):
        plan = resolver.plan(PaginationArgs(last=3, before=CursorCodec.encode(7)))

        assert plan.offset == 4
        assert plan.posts_per_page == 3
        assert plan.paged == 2
        assert plan.order == "DESC"
        assert plan.reverse is False

    def test_last_before_near_start(self, resolver):
        plan = resolver.plan(PaginationArgs(last=5, before=CursorCodec.encode(2)))

        assert plan.offset == 0
        assert plan.posts_per_page == 2
        assert plan.paged == 1

    def test_last_without_before_fetches_oldest_reversed(self, resolver):
        plan = resolver.plan(PaginationArgs(last=4))

        assert plan.order == "ASC"
        assert plan.reverse is True
        assert plan.posts_per_page == 4
        assert plan.offset == 0


class TestBuildParams:
    def context(self, page_info_selected=False) -> RequestContext:
        return RequestContext(session=None, page_info_selected=page_info_selected)

    def test_total_skipped_without_arguments(self, resolver):
        args = PaginationArgs()
        params = resolver.build_params("post", None, args, self.context(), resolver.plan(args))

        assert params.compute_total is False

    def test_total_computed_with_arguments_or_page_info(self, resolver):
        with_args = PaginationArgs(first=2)
        params = resolver.build_params("post", None, with_args, self.context(), resolver.plan(with_args))
        assert params.compute_total is True

        bare = PaginationArgs()
        params = resolver.build_params("post", None, bare, self.context(True), resolver.plan(bare))
        assert params.compute_total is True

    def test_where_merged(self, resolver):
        args = PaginationArgs(first=2, where={"author": 3, "status": "draft"})
        params = resolver.build_params("page", None, args, self.context(), resolver.plan(args))

        assert params.post_type == "page"
        assert params.post_status == "draft"
        assert params.filters == {"author": 3}

    def test_user_source_restricts_author(self, resolver):
        from press_graph.core.models import User

        source = UserView(User(id=8, login="bob", roles=[]))
        args = PaginationArgs(where={"author": 3})
        params = resolver.build_params("post", source, args, self.context(), resolver.plan(args))

        assert params.filters["author"] == 8

    def test_hooks_see_translation_context(self):
        seen = {}

        def hook(args, where, context):
            seen["context"] = context
            return {**args, "cat": 4}

        resolver = PostObjectsConnectionResolver(
            translator=QueryArgumentTranslator(hooks=[hook]), settings=GraphQLSettings()
        )
        request = self.context()
        args = PaginationArgs(first=1)
        params = resolver.build_params("post", "parent", args, request, resolver.plan(args))

        assert params.filters == {"cat": 4}
        assert seen["context"].post_type == "post"
        assert seen["context"].source == "parent"
        assert seen["context"].request is request
