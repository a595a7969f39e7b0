"""Offset-cursor pagination primitives for Relay connections.

- ``CursorCodec``: opaque offset cursors (``arrayconnection:<n>``)
- ``Connection`` / ``Edge`` / ``PageInfo``: connection result schemas
- ``connection_from_slice``: slice a fetched window into a connection
"""

from .cursor import CursorCodec
from .schemas import Connection, Edge, PageInfo
from .slicing import connection_from_slice

__all__ = [
    "Connection",
    "CursorCodec",
    "Edge",
    "PageInfo",
    "connection_from_slice",
]
