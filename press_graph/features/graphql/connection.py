"""Relay connection resolution for post objects.

``PostObjectsConnectionResolver`` turns Relay pagination arguments and a
``where`` filter into one content query, then slices the fetched page into
a ``Connection`` whose cursors are absolute offsets in the filtered,
canonically ordered (newest first) result set.

Forward pages (``first``/``after``) are fetched in canonical order from the
offset after the cursor. Backward pages (``last``) before a cursor are
fetched in canonical order ending at the cursor; backward pages without a
``before`` cursor are fetched oldest-first and reversed, so the last
records of the set come back in canonical order.

Example:
    resolver = PostObjectsConnectionResolver()
    connection = await resolver.resolve(
        "post",
        None,
        PaginationArgs(first=10, after=cursor, where={"author": 3}),
        RequestContext(session=session, page_info_selected=True),
    )
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from press_graph.core.exceptions import ArgumentConflictError, EmptyResultError
from press_graph.core.pagination import Connection, CursorCodec, connection_from_slice
from press_graph.core.settings import get_graphql_settings
from press_graph.features.content import ContentQuery, QueryParams, UserView, project

from .arguments import QueryArgumentTranslator, TranslationContext, absint

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from press_graph.core.schemas.auth import Requester
    from press_graph.core.settings import GraphQLSettings

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PaginationArgs:
    """Connection field arguments.

    ``after`` pairs with ``first`` and ``before`` with ``last``; the other
    combinations are accepted too and offsets are computed accordingly.
    """

    first: int | None = None
    last: int | None = None
    after: str | None = None
    before: str | None = None
    where: Mapping[str, Any] | None = None

    @property
    def has_any(self) -> bool:
        """Whether any argument was supplied."""
        return any(
            value is not None for value in (self.first, self.last, self.after, self.before, self.where)
        )


@dataclass(slots=True)
class RequestContext:
    """Per-request state the resolver needs."""

    session: AsyncSession
    requester: Requester | None = None
    page_info_selected: bool = False
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class PagePlan:
    """How a set of pagination arguments maps onto one query."""

    first: int | None
    last: int | None
    after: str | None
    before: str | None
    posts_per_page: int
    paged: int
    offset: int
    order: str
    reverse: bool


class PostObjectsConnectionResolver:
    """Resolve post-object connections (posts, pages, menu items)."""

    def __init__(
        self,
        translator: QueryArgumentTranslator | None = None,
        settings: GraphQLSettings | None = None,
    ) -> None:
        self.translator = translator or QueryArgumentTranslator()
        self.settings = settings or get_graphql_settings()

    def plan(self, args: PaginationArgs) -> PagePlan:
        """Validate pagination arguments and work out the query window.

        Raises:
            ArgumentConflictError: If ``after`` and ``before`` are both set,
                or ``first`` and ``last`` are both positive.
        """
        has_after = CursorCodec.is_present(args.after)
        has_before = CursorCodec.is_present(args.before)
        # Non-positive page sizes count as unset
        first = min(absint(args.first), self.settings.max_page_size) or None
        last = min(absint(args.last), self.settings.max_page_size) or None

        if has_after and has_before:
            raise ArgumentConflictError("before", "after")
        if first and last:
            raise ArgumentConflictError("first", "last")

        after = CursorCodec.decode(args.after) if has_after else 0
        before = CursorCodec.decode(args.before) if has_before else 0

        if last:
            if has_before:
                offset = max(before - last, 0)
                return PagePlan(
                    first=None,
                    last=last,
                    after=None,
                    before=args.before,
                    posts_per_page=before - offset,
                    paged=max(before // last, 1),
                    offset=offset,
                    order="DESC",
                    reverse=False,
                )
            return PagePlan(
                first=None,
                last=last,
                after=args.after if has_after else None,
                before=None,
                posts_per_page=last,
                paged=1,
                offset=0,
                order="ASC",
                reverse=True,
            )

        # Forward, or no size given: the default page size acts as ``first``
        size = first or self.settings.default_page_size
        if has_before:
            paged, offset = 1, 0
        elif has_after:
            paged, offset = after // size + 1, after + 1
        else:
            paged, offset = 1, 0
        return PagePlan(
            first=size,
            last=None,
            after=args.after if has_after else None,
            before=args.before if has_before else None,
            posts_per_page=size,
            paged=paged,
            offset=offset,
            order="DESC",
            reverse=False,
        )

    def build_params(
        self,
        post_type: str | list[str],
        source: Any,
        args: PaginationArgs,
        context: RequestContext,
        plan: PagePlan,
    ) -> QueryParams:
        """Combine the page window, translated ``where`` args and parent context."""
        compute_total = args.has_any or context.page_info_selected
        query_args: dict[str, Any] = {
            "post_type": post_type,
            "posts_per_page": plan.posts_per_page,
            "paged": plan.paged,
            "offset": plan.offset,
            "order": plan.order,
            "no_found_rows": not compute_total,
        }

        translation_context = TranslationContext(post_type=post_type, source=source, request=context)
        query_args.update(self.translator.translate(args.where, post_type, translation_context))

        if isinstance(source, UserView):
            query_args["author"] = source.id

        return QueryParams().merge(query_args)

    async def resolve(
        self,
        post_type: str | list[str],
        source: Any,
        args: PaginationArgs,
        context: RequestContext,
    ) -> Connection[Any]:
        """Resolve one connection.

        Args:
            post_type: Post type(s) to query.
            source: Parent entity view (``UserView`` restricts to its posts).
            args: Pagination arguments and ``where`` filter.
            context: Session, requester and pageInfo selection.

        Returns:
            Connection of projected views.

        Raises:
            ArgumentConflictError: On conflicting pagination arguments.
            EmptyResultError: When nothing matches and
                ``empty_connection_error`` is enabled.
        """
        plan = self.plan(args)
        params = self.build_params(post_type, source, args, context, plan)

        result = await ContentQuery(context.session).execute(params)
        records = result.records
        total = result.total_count

        logger.debug(
            "Connection query finished",
            extra={
                "post_type": post_type,
                "order": plan.order,
                "offset": plan.offset,
                "page_size": plan.posts_per_page,
                "records": len(records),
                "total_count": total,
            },
        )

        if not records:
            if self.settings.empty_connection_error:
                raise EmptyResultError(post_type)
            return Connection.empty(total_count=total)

        if plan.reverse:
            records = list(reversed(records))
            array_length = total if total is not None else len(records)
            slice_start = max(array_length - len(records), 0)
        else:
            slice_start = plan.offset
            array_length = total if total is not None else plan.offset + len(records)

        requester = context.requester
        return connection_from_slice(
            records,
            slice_start=slice_start,
            array_length=array_length,
            first=plan.first,
            last=plan.last,
            after=plan.after,
            before=plan.before,
            total_count=total,
            node_factory=lambda record: project(record, requester),
        )


__all__ = [
    "PagePlan",
    "PaginationArgs",
    "PostObjectsConnectionResolver",
    "RequestContext",
]
