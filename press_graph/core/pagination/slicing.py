"""Build Relay connections from an already-fetched slice of a result set.

This is the Relay ``connectionFromArraySlice`` algorithm: the caller fetched
``records`` starting at absolute offset ``slice_start`` out of a result set
of ``array_length`` items and passes the original pagination arguments; the
function works out which of those records belong on the page and how the
page relates to the rest of the set.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from .cursor import CursorCodec
from .schemas import Connection, Edge, PageInfo

T = TypeVar("T")


def connection_from_slice(
    records: Sequence[T],
    *,
    slice_start: int,
    array_length: int,
    first: int | None = None,
    last: int | None = None,
    after: str | None = None,
    before: str | None = None,
    total_count: int | None = None,
    node_factory: Callable[[T], Any] | None = None,
) -> Connection[Any]:
    """Slice ``records`` into a Relay connection.

    Args:
        records: Records in canonical order, starting at ``slice_start``.
        slice_start: Absolute offset of ``records[0]``.
        array_length: Size of the whole result set (or a lower bound).
        first: Forward page size, ``None`` when unset.
        last: Backward page size, ``None`` when unset.
        after: Cursor to start after.
        before: Cursor to end before.
        total_count: Exposed as ``page_info.total_count`` when given.
        node_factory: Maps each record to the node placed on its edge.

    Returns:
        Connection with edges cursored by absolute offset.
    """
    slice_end = slice_start + len(records)
    before_offset = CursorCodec.decode(before) if CursorCodec.is_present(before) else array_length
    after_offset = CursorCodec.decode(after) if CursorCodec.is_present(after) else -1

    start_offset = max(slice_start - 1, after_offset, -1) + 1
    end_offset = min(slice_end, before_offset, array_length)

    if first is not None:
        end_offset = min(end_offset, start_offset + first)
    if last is not None:
        start_offset = max(start_offset, end_offset - last)

    lo = max(start_offset - slice_start, 0)
    hi = max(end_offset - slice_start, lo)
    window = records[lo:hi]

    edges = [
        Edge(
            node=node_factory(record) if node_factory else record,
            cursor=CursorCodec.encode(start_offset + index),
        )
        for index, record in enumerate(window)
    ]

    lower_bound = after_offset + 1 if CursorCodec.is_present(after) else 0
    upper_bound = before_offset if CursorCodec.is_present(before) else array_length

    page_info = PageInfo(
        start_cursor=edges[0].cursor if edges else None,
        end_cursor=edges[-1].cursor if edges else None,
        has_previous_page=start_offset > lower_bound if last is not None else False,
        has_next_page=end_offset < upper_bound if first is not None else False,
        total_count=total_count,
    )
    return Connection(edges=edges, page_info=page_info)


__all__ = ["connection_from_slice"]
