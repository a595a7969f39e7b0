"""GraphQL enums for connection filters.

Enum values are the native query values, so translated ``where`` input can
be handed to the content query after reducing each enum to its value.
"""

from __future__ import annotations

from enum import Enum

import strawberry


@strawberry.enum(name="PostStatusEnum", description="Publishing status of a post object")
class PostStatusEnum(Enum):
    PUBLISH = "publish"
    FUTURE = "future"
    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"
    TRASH = "trash"
    AUTO_DRAFT = "auto-draft"
    INHERIT = "inherit"
    ANY = "any"


@strawberry.enum(
    name="PostObjectsConnectionOrderbyEnum",
    description="Field to order post object connections by",
)
class PostObjectsConnectionOrderbyEnum(Enum):
    AUTHOR = "author"
    TITLE = "title"
    SLUG = "name"
    MODIFIED = "modified"
    DATE = "date"
    PARENT = "parent"
    IN = "post__in"
    NAME_IN = "post_name__in"
    MENU_ORDER = "menu_order"


@strawberry.enum(name="RelationEnum", description="How the conditions of a group combine")
class RelationEnum(Enum):
    AND = "AND"
    OR = "OR"


@strawberry.enum(name="TaxonomyEnum", description="Registered taxonomies")
class TaxonomyEnum(Enum):
    CATEGORY = "category"
    TAG = "post_tag"


@strawberry.enum(name="TaxQueryField", description="Term field a tax query matches on")
class TaxQueryField(Enum):
    ID = "term_id"
    NAME = "name"
    SLUG = "slug"
    TAXONOMY_ID = "term_taxonomy_id"


@strawberry.enum(name="TaxQueryOperator", description="Tax query comparison")
class TaxQueryOperator(Enum):
    IN = "IN"
    NOT_IN = "NOT IN"
    AND = "AND"
    EXISTS = "EXISTS"
    NOT_EXISTS = "NOT EXISTS"


@strawberry.enum(name="MetaCompareEnum", description="Meta query comparison")
class MetaCompareEnum(Enum):
    EQUAL_TO = "="
    NOT_EQUAL_TO = "!="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL_TO = ">="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL_TO = "<="
    LIKE = "LIKE"
    NOT_LIKE = "NOT LIKE"
    IN = "IN"
    NOT_IN = "NOT IN"
    BETWEEN = "BETWEEN"
    NOT_BETWEEN = "NOT BETWEEN"
    EXISTS = "EXISTS"
    NOT_EXISTS = "NOT EXISTS"


@strawberry.enum(name="MetaTypeEnum", description="Type a meta value is compared as")
class MetaTypeEnum(Enum):
    NUMERIC = "NUMERIC"
    BINARY = "BINARY"
    CHAR = "CHAR"
    DATE = "DATE"
    DATETIME = "DATETIME"
    DECIMAL = "DECIMAL"
    SIGNED = "SIGNED"
    TIME = "TIME"
    UNSIGNED = "UNSIGNED"


@strawberry.enum(name="DateColumnEnum", description="Date column a date query applies to")
class DateColumnEnum(Enum):
    DATE = "post_date"
    MODIFIED = "post_modified"


__all__ = [
    "DateColumnEnum",
    "MetaCompareEnum",
    "MetaTypeEnum",
    "PostObjectsConnectionOrderbyEnum",
    "PostStatusEnum",
    "RelationEnum",
    "TaxQueryField",
    "TaxQueryOperator",
    "TaxonomyEnum",
]
