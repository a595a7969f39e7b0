"""Translate GraphQL ``where`` input into native content-query args.

Only allow-listed keys pass through, renamed to their native query names.
Empty values are dropped, enums are reduced to their values, numeric
identifiers are coerced to unsigned ints and the nested taxonomy / meta
groups are flattened into ``{"relation", "clauses"}`` mappings.

Extension hooks are plain callables injected at construction time. They run
after translation, in order, each receiving and returning the args map:

    def only_published(args, where, context):
        return {**args, "post_status": "publish"}

    translator = QueryArgumentTranslator(hooks=[only_published])
    translator.translate({"author": 3}, "post")
    # {"author": 3, "post_status": "publish"}
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from press_graph.features.content.params import absint

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TranslationContext:
    """What a hook may want to know about the field being resolved."""

    post_type: str | list[str]
    source: Any = None
    request: Any = None


ArgsHook = Callable[[dict[str, Any], Mapping[str, Any], TranslationContext], dict[str, Any]]


def is_empty(value: Any) -> bool:
    """Whether a translated value counts as absent."""
    if value is None or value is False:
        return True
    if isinstance(value, int | float) and value == 0:
        return True
    if isinstance(value, str | list | tuple | dict | set):
        return len(value) == 0
    return False


def reduce_value(value: Any) -> Any:
    """Replace enums with their values and drop ``None`` entries, recursively."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {k: reduce_value(v) for k, v in value.items() if v is not None}
    if isinstance(value, list | tuple):
        return [reduce_value(v) for v in value if v is not None]
    return value


class QueryArgumentTranslator:
    """Map ``where`` input (snake_case keys) to native query args.

    Attributes:
        ALLOWED_ARGS: input key -> native key. Anything else is ignored.
        ID_ARGS: inputs holding one numeric identifier.
        ID_LIST_ARGS: inputs holding a list of numeric identifiers.
        MAX_RELATION_CLAUSES: groups with more clauses lose their relation.
    """

    ALLOWED_ARGS: ClassVar[dict[str, str]] = {
        # author
        "author": "author",
        "author_name": "author_name",
        "author_in": "author__in",
        "author_not_in": "author__not_in",
        # category
        "cat": "cat",
        "category_name": "category_name",
        "category_and": "category__and",
        "category_in": "category__in",
        "category_not_in": "category__not_in",
        # tag
        "tag": "tag",
        "tag_id": "tag_id",
        "tag_ids": "tag__and",
        "tag_not_in": "tag__not_in",
        "tag_slug_and": "tag_slug__and",
        "tag_slug_in": "tag_slug__in",
        # post
        "id": "p",
        "name": "name",
        "title": "title",
        "parent": "post_parent",
        "parent_in": "post_parent__in",
        "parent_not_in": "post_parent__not_in",
        "in_": "post__in",
        "not_in": "post__not_in",
        "name_in": "post_name__in",
        # password
        "has_password": "has_password",
        "password": "post_password",
        # status / order
        "status": "post_status",
        "orderby": "orderby",
        # groups
        "date_query": "date_query",
        "tax_query": "tax_query",
        "meta_query": "meta_query",
    }
    ID_ARGS: ClassVar[frozenset[str]] = frozenset({"id", "author", "cat", "tag_id", "parent"})
    ID_LIST_ARGS: ClassVar[frozenset[str]] = frozenset(
        {
            "author_in",
            "author_not_in",
            "category_and",
            "category_in",
            "category_not_in",
            "tag_ids",
            "tag_not_in",
            "parent_in",
            "parent_not_in",
            "in_",
            "not_in",
        }
    )
    GROUP_ARRAYS: ClassVar[dict[str, str]] = {
        "tax_query": "tax_array",
        "meta_query": "meta_array",
    }
    MAX_RELATION_CLAUSES: ClassVar[int] = 2

    def __init__(self, hooks: Sequence[ArgsHook] = ()) -> None:
        self.hooks = list(hooks)

    def translate(
        self,
        where: Mapping[str, Any] | None,
        post_type: str | list[str],
        context: TranslationContext | None = None,
    ) -> dict[str, Any]:
        """Translate ``where`` into native args, then apply the hooks.

        Args:
            where: Filter input with snake_case keys (may be empty).
            post_type: Post type(s) being queried.
            context: Passed through to the hooks.

        Returns:
            Native query args. Never raises for bad input; invalid values
            are coerced or dropped.
        """
        where = where or {}
        context = context or TranslationContext(post_type=post_type)
        args: dict[str, Any] = {}

        for key, value in where.items():
            native = self.ALLOWED_ARGS.get(key)
            if native is None:
                continue
            value = self.normalize(key, value)
            if is_empty(value):
                continue
            args[native] = value

        for hook in self.hooks:
            args = hook(args, where, context)

        logger.debug(
            "Translated where args",
            extra={"post_type": post_type, "input_keys": sorted(where), "args": sorted(args)},
        )
        return args

    def normalize(self, key: str, value: Any) -> Any:
        """Coerce a single allow-listed input value."""
        if key in self.ID_ARGS:
            return absint(reduce_value(value))
        if key in self.ID_LIST_ARGS:
            values = reduce_value(value)
            if not isinstance(values, list):
                values = [values]
            return [v for v in (absint(v) for v in values) if v]
        if key in self.GROUP_ARRAYS:
            return self.flatten_group(reduce_value(value), self.GROUP_ARRAYS[key])
        return reduce_value(value)

    def flatten_group(self, group: Mapping[str, Any] | None, array_key: str) -> dict[str, Any] | None:
        """Turn ``{relation, <array_key>: [...]}`` into ``{relation?, clauses}``.

        The relation is only kept when the group has at most
        ``MAX_RELATION_CLAUSES`` clauses.
        """
        if not group:
            return None
        clauses = [dict(row) for row in group.get(array_key) or [] if row]
        if not clauses:
            return None

        flattened: dict[str, Any] = {}
        relation = group.get("relation")
        if relation and len(clauses) <= self.MAX_RELATION_CLAUSES:
            flattened["relation"] = relation
        flattened["clauses"] = clauses
        return flattened


__all__ = [
    "ArgsHook",
    "QueryArgumentTranslator",
    "TranslationContext",
    "absint",
    "is_empty",
    "reduce_value",
]
