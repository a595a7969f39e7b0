"""Input types for filtering post object connections."""

from __future__ import annotations

import strawberry

from .enums import (
    DateColumnEnum,
    MetaCompareEnum,
    MetaTypeEnum,
    PostObjectsConnectionOrderbyEnum,
    PostStatusEnum,
    RelationEnum,
    TaxonomyEnum,
    TaxQueryField,
    TaxQueryOperator,
)


@strawberry.input(description="A (partial) calendar date")
class DateInput:
    year: int | None = None
    month: int | None = None
    day: int | None = None


@strawberry.input(description="Filter by post date")
class DateQueryInput:
    year: int | None = None
    month: int | None = None
    week: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    after: DateInput | None = strawberry.field(default=None, description="Dates after this one")
    before: DateInput | None = strawberry.field(default=None, description="Dates before this one")
    inclusive: bool | None = strawberry.field(
        default=None,
        description="Whether after/before bounds match their own period",
    )
    compare: str | None = strawberry.field(default=None, description="Operator for the unit fields")
    column: DateColumnEnum | None = None
    relation: RelationEnum | None = None


@strawberry.input(description="One taxonomy condition")
class TaxArray:
    taxonomy: TaxonomyEnum | None = None
    field: TaxQueryField | None = None
    terms: list[str] | None = strawberry.field(default=None, description="Terms to match")
    include_children: bool | None = None
    operator: TaxQueryOperator | None = None


@strawberry.input(description="Group of taxonomy conditions")
class TaxQuery:
    relation: RelationEnum | None = strawberry.field(
        default=None,
        description="Combines the conditions; only honoured for up to two conditions",
    )
    tax_array: list[TaxArray] | None = None


@strawberry.input(description="One meta condition")
class MetaArray:
    key: str | None = None
    value: str | None = None
    compare: MetaCompareEnum | None = None
    type: MetaTypeEnum | None = None


@strawberry.input(description="Group of meta conditions")
class MetaQuery:
    relation: RelationEnum | None = strawberry.field(
        default=None,
        description="Combines the conditions; only honoured for up to two conditions",
    )
    meta_array: list[MetaArray] | None = None


@strawberry.input(description="Arguments for filtering post object connections")
class PostObjectsConnectionWhereArgs:
    # Author
    author: int | None = strawberry.field(default=None, description="Author ID")
    author_name: str | None = strawberry.field(default=None, description="Author slug")
    author_in: list[int] | None = None
    author_not_in: list[int] | None = None

    # Category
    cat: int | None = strawberry.field(default=None, description="Category ID")
    category_name: str | None = strawberry.field(default=None, description="Category slug")
    category_and: list[int] | None = None
    category_in: list[int] | None = None
    category_not_in: list[int] | None = None

    # Tag
    tag: str | None = strawberry.field(
        default=None,
        description='Tag slug; "a,b" matches either, "a+b" requires both',
    )
    tag_id: int | None = None
    tag_ids: list[int] | None = strawberry.field(default=None, description="Posts having every tag ID")
    tag_not_in: list[int] | None = None
    tag_slug_and: list[str] | None = None
    tag_slug_in: list[str] | None = None

    tax_query: TaxQuery | None = None

    # Post
    id: int | None = strawberry.field(default=None, description="Database ID")
    name: str | None = strawberry.field(default=None, description="Slug")
    title: str | None = None
    parent: int | None = strawberry.field(default=None, description="Parent database ID")
    parent_in: list[int] | None = None
    parent_not_in: list[int] | None = None
    in_: list[int] | None = strawberry.field(name="in", default=None, description="Database IDs")
    not_in: list[int] | None = None
    name_in: list[str] | None = None

    # Password
    has_password: bool | None = None
    password: str | None = None

    # Status / order
    status: PostStatusEnum | None = None
    orderby: PostObjectsConnectionOrderbyEnum | None = None

    date_query: DateQueryInput | None = None
    meta_query: MetaQuery | None = None


__all__ = [
    "DateInput",
    "DateQueryInput",
    "MetaArray",
    "MetaQuery",
    "PostObjectsConnectionWhereArgs",
    "TaxArray",
    "TaxQuery",
]
