"""Relay global object identification.

Global IDs are ``base64("<type>:<id>")``, the format of graphql-relay's
``toGlobalId``. Decoding is lenient: plain database IDs are accepted too.
"""

from __future__ import annotations

import base64
import binascii

import strawberry


def to_global_id(type_name: str, object_id: int | str) -> strawberry.ID:
    """Encode a type name and database ID as a global ID."""
    raw = f"{type_name}:{object_id}".encode()
    return strawberry.ID(base64.b64encode(raw).decode("ascii"))


def from_global_id(global_id: str) -> tuple[str | None, str]:
    """Split a global ID into ``(type_name, id)``.

    Values that are not base64 ``type:id`` pairs are returned as
    ``(None, value)``.
    """
    try:
        raw = base64.b64decode(global_id.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError):
        return None, global_id
    type_name, sep, object_id = raw.partition(":")
    if not sep:
        return None, global_id
    return type_name, object_id


def decode_id(value: str | int) -> int:
    """Database ID from a global or plain ID; 0 when it cannot be parsed."""
    if isinstance(value, int):
        return max(value, 0)
    _, object_id = from_global_id(value)
    try:
        return max(int(object_id), 0)
    except ValueError:
        return 0


__all__ = ["decode_id", "from_global_id", "to_global_id"]
