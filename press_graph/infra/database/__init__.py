"""Database infrastructure: engine, session factory and lifecycle hooks."""

from .session import (
    AsyncSessionLocal,
    build_engine,
    close_database,
    engine,
    get_async_session,
    init_database,
)

__all__ = [
    "AsyncSessionLocal",
    "build_engine",
    "close_database",
    "engine",
    "get_async_session",
    "init_database",
]
