"""Unit tests for the where-argument translator."""
from __future__ import annotations

import pytest

from press_graph.features.graphql.arguments import (
    QueryArgumentTranslator,
    TranslationContext,
    absint,
    is_empty,
    reduce_value,
)
from press_graph.features.graphql.types.enums import (
    MetaCompareEnum,
    PostObjectsConnectionOrderbyEnum,
    PostStatusEnum,
    RelationEnum,
    TaxonomyEnum,
)


@pytest.fixture
def translator() -> QueryArgumentTranslator:
    return QueryArgumentTranslator()


class TestHelpers:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(5, 5), ("7", 7), (-3, 0), ("abc", 0), (None, 0), (True, 0), (2.9, 2)],
    )
    def test_absint(self, value, expected):
        assert absint(value) == expected

    @pytest.mark.parametrize("value", [None, False, 0, "", [], {}])
    def test_is_empty(self, value):
        assert is_empty(value) is True

    @pytest.mark.parametrize("value", [True, 1, "x", [0], {"a": None}])
    def test_is_not_empty(self, value):
        assert is_empty(value) is False

    def test_reduce_value_unwraps_enums_and_drops_none(self):
        value = {"relation": RelationEnum.OR, "rows": [None, {"taxonomy": TaxonomyEnum.TAG, "x": None}]}

        assert reduce_value(value) == {"relation": "OR", "rows": [{"taxonomy": "post_tag"}]}


class TestTranslate:
    def test_renames_allowed_keys(self, translator):
        args = translator.translate(
            {"author_in": [3, 4], "tag_slug_in": ["news"], "parent": 9, "in_": [1, 2]},
            "post",
        )

        assert args == {
            "author__in": [3, 4],
            "tag_slug__in": ["news"],
            "post_parent": 9,
            "post__in": [1, 2],
        }

    def test_drops_unknown_keys(self, translator):
        assert translator.translate({"post_type": "page", "posts_per_page": 500}, "post") == {}

    def test_drops_empty_values(self, translator):
        args = translator.translate(
            {"author": 0, "title": "", "category_in": [], "has_password": False, "name": None},
            "post",
        )

        assert args == {}

    def test_empty_where(self, translator):
        assert translator.translate(None, "post") == {}
        assert translator.translate({}, "post") == {}

    def test_coerces_identifiers(self, translator):
        args = translator.translate({"id": "12", "author_not_in": ["3", -1, "x", 4]}, "post")

        assert args == {"p": 12, "author__not_in": [3, 4]}

    def test_negative_id_dropped(self, translator):
        assert translator.translate({"author": -5}, "post") == {}

    def test_reduces_enums(self, translator):
        args = translator.translate(
            {"status": PostStatusEnum.DRAFT, "orderby": PostObjectsConnectionOrderbyEnum.SLUG},
            "post",
        )

        assert args == {"post_status": "draft", "orderby": "name"}

    def test_flattens_tax_query(self, translator):
        where = {
            "tax_query": {
                "relation": RelationEnum.OR,
                "tax_array": [
                    {"taxonomy": TaxonomyEnum.CATEGORY, "terms": ["news"], "field": "slug"},
                    {"taxonomy": TaxonomyEnum.TAG, "terms": ["featured"], "field": "slug"},
                ],
            }
        }

        args = translator.translate(where, "post")

        assert args["tax_query"] == {
            "relation": "OR",
            "clauses": [
                {"taxonomy": "category", "terms": ["news"], "field": "slug"},
                {"taxonomy": "post_tag", "terms": ["featured"], "field": "slug"},
            ],
        }

    def test_relation_dropped_for_more_than_two_clauses(self, translator):
        rows = [{"key": f"k{i}", "value": "v", "compare": MetaCompareEnum.EQUAL_TO} for i in range(3)]

        args = translator.translate(
            {"meta_query": {"relation": RelationEnum.OR, "meta_array": rows}}, "post"
        )

        assert "relation" not in args["meta_query"]
        assert len(args["meta_query"]["clauses"]) == 3
        assert args["meta_query"]["clauses"][0]["compare"] == "="

    def test_group_without_rows_dropped(self, translator):
        assert translator.translate({"tax_query": {"relation": "AND", "tax_array": []}}, "post") == {}


class TestHooks:
    def test_hooks_run_in_order_after_translation(self):
        calls = []

        def first(args, where, context):
            calls.append(("first", dict(args)))
            return {**args, "post_status": "publish", "order_marker": 1}

        def second(args, where, context):
            calls.append(("second", dict(args)))
            return {**args, "order_marker": 2}

        translator = QueryArgumentTranslator(hooks=[first, second])
        args = translator.translate({"author": 3}, "post")

        assert args == {"author": 3, "post_status": "publish", "order_marker": 2}
        assert calls == [
            ("first", {"author": 3}),
            ("second", {"author": 3, "post_status": "publish", "order_marker": 1}),
        ]

    def test_hook_receives_raw_where_and_context(self):
        seen = {}

        def hook(args, where, context):
            seen.update(where=where, context=context)
            return args

        context = TranslationContext(post_type="page", source="parent")
        QueryArgumentTranslator(hooks=[hook]).translate({"bogus": 1}, "page", context)

        assert seen["where"] == {"bogus": 1}
        assert seen["context"] is context

    def test_hooks_run_for_empty_where(self):
        translator = QueryArgumentTranslator(hooks=[lambda args, where, context: {**args, "cat": 5}])

        assert translator.translate(None, "post") == {"cat": 5}
