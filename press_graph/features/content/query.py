"""Content data source.

``ContentQuery`` runs ``QueryParams`` against the content store and returns
one page of ``Post`` records plus, when requested, the total number of
matches. It implements the subset of ``WP_Query`` parameters the GraphQL
layer emits: identifier sets, author, category, tag, taxonomy, meta and date
filters, status filtering, ordering, ``offset``/``paged`` paging and an
optional count.

Example:
    params = QueryParams(post_type="page", posts_per_page=5, no_found_rows=False)
    result = await ContentQuery(session).execute(params)
    print(len(result.records), result.total_count)
"""

from __future__ import annotations

import calendar
import logging
import operator
from collections.abc import Callable, Iterable
from datetime import MAXYEAR, MINYEAR, datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    Integer,
    Numeric,
    and_,
    case,
    cast,
    exists,
    extract,
    false,
    func,
    or_,
    select,
    true,
)

from press_graph.core.models import Post, PostMeta, Term, User, term_relationships

from .params import EXCLUDED_FROM_ANY, QueryParams, QueryResult, absint

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement, Select
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

ORDERBY_COLUMNS = {
    "date": Post.date,
    "post_date": Post.date,
    "modified": Post.modified,
    "post_modified": Post.modified,
    "title": Post.title,
    "name": Post.name,
    "author": Post.author_id,
    "parent": Post.parent_id,
    "menu_order": Post.menu_order,
    "id": Post.id,
    "ID": Post.id,
}

TERM_FIELDS = {
    "term_id": Term.id,
    "term_taxonomy_id": Term.id,
    "id": Term.id,
    "slug": Term.slug,
    "name": Term.name,
}

COMPARATORS: dict[str, Callable[[Any, Any], Any]] = {
    "=": operator.eq,
    "!=": operator.ne,
    ">": operator.gt,
    ">=": operator.ge,
    "<": operator.lt,
    "<=": operator.le,
}

DATE_UNITS = ("year", "month", "week", "day", "hour", "minute", "second")


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, Iterable):
        return list(value)
    return [value]


def _as_ints(value: Any) -> list[int]:
    return [absint(v) for v in _as_list(value)]


def _combine(conditions: list[ColumnElement[bool]], relation: str | None) -> ColumnElement[bool]:
    if (relation or "AND").upper() == "OR":
        return or_(*conditions)
    return and_(*conditions)


# ============================================================================
# Taxonomy conditions
# ============================================================================


def _term_post_ids(taxonomy: str, column: Any = None, values: list[Any] | None = None) -> Select:
    stmt = (
        select(term_relationships.c.post_id)
        .join(Term, Term.id == term_relationships.c.term_id)
        .where(Term.taxonomy == taxonomy)
    )
    if column is not None:
        stmt = stmt.where(column.in_(values or []))
    return stmt


def has_terms(taxonomy: str, column: Any, values: list[Any]) -> ColumnElement[bool]:
    """Post is assigned at least one of ``values``."""
    return Post.id.in_(_term_post_ids(taxonomy, column, values))


def has_all_terms(taxonomy: str, column: Any, values: list[Any]) -> ColumnElement[bool]:
    """Post is assigned every one of ``values``."""
    return and_(*(has_terms(taxonomy, column, [value]) for value in values))


def lacks_terms(taxonomy: str, column: Any, values: list[Any]) -> ColumnElement[bool]:
    """Post is assigned none of ``values``."""
    return Post.id.not_in(_term_post_ids(taxonomy, column, values))


def tax_clause(clause: dict[str, Any]) -> ColumnElement[bool]:
    """Build one taxonomy condition (or a nested group) from a native row."""
    if "clauses" in clause:
        return tax_group(clause)

    taxonomy = clause.get("taxonomy") or "category"
    operator_name = (clause.get("operator") or "IN").upper()
    if operator_name == "EXISTS":
        return Post.id.in_(_term_post_ids(taxonomy))
    if operator_name == "NOT EXISTS":
        return Post.id.not_in(_term_post_ids(taxonomy))

    field_name = clause.get("field") or "term_id"
    column = TERM_FIELDS.get(field_name, Term.id)
    terms = _as_list(clause.get("terms"))
    if column is Term.id:
        terms = [term_id for term_id in (absint(term) for term in terms) if term_id]

    if not terms:
        # IN over nothing matches nothing; AND / NOT IN over nothing constrain nothing
        return false() if operator_name not in {"AND", "NOT IN"} else true()
    if operator_name == "AND":
        return has_all_terms(taxonomy, column, terms)
    if operator_name == "NOT IN":
        return lacks_terms(taxonomy, column, terms)
    return has_terms(taxonomy, column, terms)


def tax_group(group: dict[str, Any]) -> ColumnElement[bool]:
    """Combine taxonomy clauses with the group's relation (AND when absent)."""
    conditions = [tax_clause(clause) for clause in group.get("clauses", [])]
    return _combine(conditions, group.get("relation"))


# ============================================================================
# Meta conditions
# ============================================================================


def _typed(column: Any, meta_type: str | None) -> Any:
    meta_type = (meta_type or "CHAR").upper()
    if meta_type in {"NUMERIC", "SIGNED", "UNSIGNED"}:
        return cast(column, Integer)
    if meta_type == "DECIMAL":
        return cast(column, Numeric)
    return column


def _typed_value(value: Any, meta_type: str | None) -> Any:
    meta_type = (meta_type or "CHAR").upper()
    if isinstance(value, list):
        return [_typed_value(v, meta_type) for v in value]
    try:
        if meta_type in {"NUMERIC", "SIGNED", "UNSIGNED"}:
            return int(value)
        if meta_type == "DECIMAL":
            return float(value)
    except (TypeError, ValueError):
        return value
    return value


def meta_clause(clause: dict[str, Any]) -> ColumnElement[bool]:
    """Build one meta condition (or a nested group) from a native row."""
    if "clauses" in clause:
        return meta_group(clause)

    compare = (clause.get("compare") or "=").upper()
    stmt = select(PostMeta.id).where(PostMeta.post_id == Post.id)
    key = clause.get("key")
    if key:
        stmt = stmt.where(PostMeta.key == key)

    if compare == "NOT EXISTS":
        return ~exists(stmt)
    if compare == "EXISTS" or "value" not in clause or clause["value"] is None:
        return exists(stmt)

    meta_type = clause.get("type")
    column = _typed(PostMeta.value, meta_type)
    value = _typed_value(clause["value"], meta_type)
    if compare in COMPARATORS:
        condition = COMPARATORS[compare](column, value)
    elif compare == "LIKE":
        condition = column.like(f"%{value}%")
    elif compare == "NOT LIKE":
        condition = column.not_like(f"%{value}%")
    elif compare == "IN":
        condition = column.in_(_typed_value(_as_list(clause["value"]), meta_type))
    elif compare == "NOT IN":
        condition = column.not_in(_typed_value(_as_list(clause["value"]), meta_type))
    elif compare in {"BETWEEN", "NOT BETWEEN"}:
        bounds = _typed_value(_as_list(clause["value"]), meta_type)
        if len(bounds) < 2:
            logger.debug("Ignoring %s meta comparison without two bounds", compare, extra={"key": key})
            return exists(stmt)
        low, high = bounds[:2]
        condition = column.between(low, high)
        if compare == "NOT BETWEEN":
            condition = ~condition
    else:
        condition = column == value
    return exists(stmt.where(condition))


def meta_group(group: dict[str, Any]) -> ColumnElement[bool]:
    """Combine meta clauses with the group's relation (AND when absent)."""
    conditions = [meta_clause(clause) for clause in group.get("clauses", [])]
    return _combine(conditions, group.get("relation"))


# ============================================================================
# Date conditions
# ============================================================================


def _period_bound(spec: dict[str, Any], to_max: bool) -> datetime:
    """First (or last) moment of the period a partial date names."""
    # Out-of-range parts are clamped into the calendar
    year = min(max(absint(spec.get("year")) or datetime.now().year, MINYEAR), MAXYEAR)
    month = min(absint(spec.get("month")), 12) or (12 if to_max else 1)
    last_day = calendar.monthrange(year, month)[1]
    day = min(absint(spec.get("day")), last_day) or (last_day if to_max else 1)
    if not to_max:
        return datetime(year, month, day)
    return datetime(year, month, day, 23, 59, 59)


def date_clause(query: dict[str, Any]) -> ColumnElement[bool] | None:
    """Translate a date query into a condition on the post date column."""
    column = Post.modified if query.get("column") in {"modified", "post_modified"} else Post.date
    compare = COMPARATORS.get(query.get("compare") or "=", operator.eq)
    inclusive = bool(query.get("inclusive"))
    conditions: list[ColumnElement[bool]] = []

    for unit in DATE_UNITS:
        value = query.get(unit)
        if value is not None:
            conditions.append(compare(extract(unit, column), int(value)))

    if query.get("after"):
        bound = _period_bound(query["after"], to_max=not inclusive)
        conditions.append(column >= bound if inclusive else column > bound)
    if query.get("before"):
        bound = _period_bound(query["before"], to_max=inclusive)
        conditions.append(column <= bound if inclusive else column < bound)

    if not conditions:
        return None
    return _combine(conditions, query.get("relation"))


# ============================================================================
# Query
# ============================================================================


class ContentQuery:
    """Run content queries against an ``AsyncSession``."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def execute(self, params: QueryParams) -> QueryResult:
        """Fetch one page of posts for ``params``.

        Args:
            params: Query parameters.

        Returns:
            QueryResult with records in query order and, when
            ``params.compute_total`` is set, the number of matches.
        """
        conditions = self.build_conditions(params)

        stmt = select(Post).where(*conditions).order_by(*self.build_ordering(params))
        if params.posts_per_page >= 0:
            stmt = stmt.limit(params.posts_per_page)
        if params.skip:
            stmt = stmt.offset(params.skip)

        result = await self.session.execute(stmt)
        records = list(result.scalars().all())

        total_count = None
        if params.compute_total:
            count_stmt = select(func.count()).select_from(
                select(Post.id).where(*conditions).subquery()
            )
            total_count = (await self.session.execute(count_stmt)).scalar_one()

        logger.debug(
            "Content query executed",
            extra={
                "post_type": params.post_type,
                "limit": params.posts_per_page,
                "skip": params.skip,
                "order": params.order,
                "records": len(records),
                "total_count": total_count,
            },
        )
        return QueryResult(records=records, total_count=total_count)

    def build_conditions(self, params: QueryParams) -> list[ColumnElement[bool]]:
        """Translate params into WHERE conditions."""
        conditions: list[ColumnElement[bool]] = []

        post_types = _as_list(params.post_type)
        if post_types and "any" not in post_types:
            conditions.append(Post.post_type.in_(post_types))

        statuses = _as_list(params.post_status)
        if "any" in statuses:
            conditions.append(Post.status.not_in(EXCLUDED_FROM_ANY))
        elif statuses:
            conditions.append(Post.status.in_(statuses))

        if params.post__in:
            conditions.append(Post.id.in_(_as_ints(params.post__in)))

        for key, value in params.filters.items():
            handler = FILTERS.get(key)
            if handler is None:
                logger.debug("Ignoring unsupported query arg", extra={"arg": key})
                continue
            condition = handler(value)
            if condition is not None:
                conditions.append(condition)
        return conditions

    def build_ordering(self, params: QueryParams) -> list[Any]:
        """ORDER BY clauses; every ordering ends with ``id`` for stability."""
        descending = params.order.upper() == "DESC"

        def directed(column: Any) -> Any:
            return column.desc() if descending else column.asc()

        orderby = _as_list(params.orderby) or ["date"]
        clauses: list[Any] = []

        if "post__in" in orderby and params.post__in:
            positions = {post_id: index for index, post_id in enumerate(_as_ints(params.post__in))}
            return [case(positions, value=Post.id, else_=len(positions)), Post.id]
        if "post_name__in" in orderby and params.filters.get("post_name__in"):
            names = _as_list(params.filters["post_name__in"])
            positions = {name: index for index, name in enumerate(names)}
            return [case(positions, value=Post.name, else_=len(positions)), Post.id]

        if not params.ignore_sticky_posts and orderby == ["date"]:
            clauses.append(directed(Post.is_sticky))

        for name in orderby:
            column = ORDERBY_COLUMNS.get(name)
            if column is not None and column is not Post.id:
                clauses.append(directed(column))
        clauses.append(directed(Post.id))
        return clauses


# ============================================================================
# Native filter handlers (arg name -> condition builder)
# ============================================================================


def _author_by_name(value: Any) -> ColumnElement[bool]:
    return Post.author_id.in_(select(User.id).where(User.nicename == value))


def _has_password(value: Any) -> ColumnElement[bool]:
    return Post.password != "" if value else Post.password == ""


def _tag_slugs(value: Any) -> ColumnElement[bool]:
    # "a+b" requires every tag, "a,b" any of them
    if isinstance(value, str) and "+" in value:
        return has_all_terms("post_tag", Term.slug, [v.strip() for v in value.split("+") if v.strip()])
    return has_terms("post_tag", Term.slug, _as_list(value))


def _date_query(value: Any) -> ColumnElement[bool] | None:
    queries = value if isinstance(value, list) else [value]
    conditions = [c for c in (date_clause(q) for q in queries if q) if c is not None]
    return and_(*conditions) if conditions else None


FILTERS: dict[str, Callable[[Any], ColumnElement[bool] | None]] = {
    # author
    "author": lambda v: Post.author_id.in_(_as_ints(v)),
    "author_name": _author_by_name,
    "author__in": lambda v: Post.author_id.in_(_as_ints(v)),
    "author__not_in": lambda v: or_(Post.author_id.is_(None), Post.author_id.not_in(_as_ints(v))),
    # category
    "cat": lambda v: has_terms("category", Term.id, _as_ints(v)),
    "category_name": lambda v: has_terms("category", Term.slug, _as_list(v)),
    "category__and": lambda v: has_all_terms("category", Term.id, _as_ints(v)),
    "category__in": lambda v: has_terms("category", Term.id, _as_ints(v)),
    "category__not_in": lambda v: lacks_terms("category", Term.id, _as_ints(v)),
    # tag
    "tag": _tag_slugs,
    "tag_id": lambda v: has_terms("post_tag", Term.id, _as_ints(v)),
    "tag__and": lambda v: has_all_terms("post_tag", Term.id, _as_ints(v)),
    "tag__in": lambda v: has_terms("post_tag", Term.id, _as_ints(v)),
    "tag__not_in": lambda v: lacks_terms("post_tag", Term.id, _as_ints(v)),
    "tag_slug__and": lambda v: has_all_terms("post_tag", Term.slug, _as_list(v)),
    "tag_slug__in": lambda v: has_terms("post_tag", Term.slug, _as_list(v)),
    # post
    "p": lambda v: Post.id == absint(v),
    "name": lambda v: Post.name == v,
    "title": lambda v: Post.title == v,
    "post_parent": lambda v: Post.parent_id == absint(v),
    "post_parent__in": lambda v: Post.parent_id.in_(_as_ints(v)),
    "post_parent__not_in": lambda v: or_(Post.parent_id.is_(None), Post.parent_id.not_in(_as_ints(v))),
    "post__not_in": lambda v: Post.id.not_in(_as_ints(v)),
    "post_name__in": lambda v: Post.name.in_(_as_list(v)),
    # password
    "has_password": _has_password,
    "post_password": lambda v: Post.password == v,
    # groups
    "date_query": _date_query,
    "tax_query": tax_group,
    "meta_query": meta_group,
}


__all__ = [
    "FILTERS",
    "ORDERBY_COLUMNS",
    "ContentQuery",
    "date_clause",
    "meta_clause",
    "meta_group",
    "tax_clause",
    "tax_group",
]
