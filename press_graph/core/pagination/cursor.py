"""Offset cursor encoding and decoding for Relay connections.

Cursors are opaque strings that encode the zero-based position of a record
in the filtered, ordered result set, using the Relay array-connection
format:

    base64("arrayconnection:<offset>")

Example:
    >>> CursorCodec.encode(2)
    'YXJyYXljb25uZWN0aW9uOjI='
    >>> CursorCodec.decode("YXJyYXljb25uZWN0aW9uOjI=")
    2

Cursors are positional: writes between two page requests can shift records
across page boundaries. Staleness is not detected.
"""

from __future__ import annotations

import base64
import binascii

PREFIX = "arrayconnection:"


class CursorCodec:
    """Encode and decode offset cursors.

    ``decode`` never raises: absent, malformed or negative cursors decode to
    offset 0 so pagination arguments can never fail a query.
    """

    prefix = PREFIX

    @classmethod
    def encode(cls, offset: int) -> str:
        """Encode a non-negative offset to an opaque cursor.

        Args:
            offset: Zero-based position in the result set.

        Returns:
            Base64 cursor string.

        Raises:
            ValueError: If offset is negative.
        """
        if offset < 0:
            msg = f"Cursor offset must be non-negative, got {offset}"
            raise ValueError(msg)
        return base64.b64encode(f"{cls.prefix}{offset}".encode()).decode("ascii")

    @classmethod
    def decode(cls, cursor: str | None) -> int:
        """Decode a cursor back to its offset.

        Args:
            cursor: Cursor produced by ``encode`` (or anything else).

        Returns:
            The encoded offset, or 0 when the cursor is absent or invalid.
        """
        if not cursor or not isinstance(cursor, str):
            return 0
        try:
            raw = base64.b64decode(cursor.encode("ascii"), validate=True).decode("utf-8")
        except (binascii.Error, UnicodeError, ValueError):
            return 0
        if not raw.startswith(cls.prefix):
            return 0
        try:
            offset = int(raw[len(cls.prefix) :])
        except ValueError:
            return 0
        return max(offset, 0)

    @classmethod
    def is_present(cls, cursor: str | None) -> bool:
        """Whether a cursor argument was supplied (non-empty string)."""
        return isinstance(cursor, str) and cursor != ""


__all__ = ["PREFIX", "CursorCodec"]
