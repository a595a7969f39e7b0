"""Content query parameters and results."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from press_graph.core.models import Post

SortOrder = Literal["ASC", "DESC"]

# Statuses hidden from ``post_status="any"``
EXCLUDED_FROM_ANY = frozenset({"trash", "auto-draft"})


def absint(value: Any) -> int:
    """Unsigned integer coercion; negative or non-numeric input becomes 0."""
    if isinstance(value, bool):
        return 0
    try:
        number = int(value)
    except (TypeError, ValueError):
        return 0
    return max(number, 0)


@dataclass(frozen=True, slots=True)
class QueryParams:
    """Parameters of a single content query.

    Field names follow the native query vocabulary so translated ``where``
    args and hook output can be merged without renaming. Keys without a
    dedicated field land in ``filters``.

    ``offset`` overrides ``paged`` when set; ``posts_per_page=-1`` disables
    the limit.
    """

    post_type: str | list[str] = "post"
    post_status: str | list[str] = "publish"
    posts_per_page: int = 10
    paged: int = 1
    offset: int | None = None
    order: SortOrder = "DESC"
    orderby: str | list[str] = "date"
    no_found_rows: bool = True
    ignore_sticky_posts: bool = False
    post__in: list[int] | None = None
    filters: dict[str, Any] = field(default_factory=dict)

    @property
    def compute_total(self) -> bool:
        return not self.no_found_rows

    @property
    def skip(self) -> int:
        """Number of rows to skip before the page starts."""
        if self.offset is not None:
            return max(self.offset, 0)
        if self.posts_per_page < 0:
            return 0
        return max(self.paged - 1, 0) * self.posts_per_page

    def merge(self, args: dict[str, Any]) -> QueryParams:
        """Return a copy with native ``args`` merged in (later keys win)."""
        if not args:
            return self
        own = _FIELD_NAMES - {"filters"}
        updates = {key: value for key, value in args.items() if key in own}
        extra = {key: value for key, value in args.items() if key not in own}
        if extra:
            updates["filters"] = {**self.filters, **extra}
        return replace(self, **updates)


_FIELD_NAMES = frozenset(f.name for f in fields(QueryParams))


@dataclass(slots=True)
class QueryResult:
    """Records of one page in query order, plus the total when computed."""

    records: list[Post]
    total_count: int | None = None

    def __len__(self) -> int:
        return len(self.records)


__all__ = ["EXCLUDED_FROM_ANY", "QueryParams", "QueryResult", "SortOrder", "absint"]
