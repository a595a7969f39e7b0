"""Database session management for the async SQLAlchemy engine."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from press_graph.core.settings import get_app_settings, get_db_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from press_graph.core.settings import DatabaseSettings

logger = logging.getLogger(__name__)


def build_engine(db_settings: DatabaseSettings | None = None) -> AsyncEngine:
    """Create an async engine from database settings.

    Pool options are only passed for server databases; SQLite uses the
    driver's default pool.

    Args:
        db_settings: Settings to use. Defaults to get_db_settings().

    Returns:
        Configured AsyncEngine.
    """
    db_settings = db_settings or get_db_settings()
    options: dict[str, Any] = {
        "echo": db_settings.echo or get_app_settings().debug,
    }
    if not db_settings.is_sqlite:
        options.update(
            pool_size=db_settings.pool_size,
            max_overflow=db_settings.max_overflow,
            pool_timeout=db_settings.pool_timeout,
            pool_recycle=db_settings.pool_recycle,
            pool_pre_ping=db_settings.pool_pre_ping,
        )
    return create_async_engine(db_settings.database_url, **options)


engine = build_engine()

# Create session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Get async database session.

    Yields:
        Database session that is automatically closed.

    Example:
        async with get_async_session() as session:
            result = await session.execute(select(Post))
            posts = result.scalars().all()
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_database(create_tables: bool | None = None) -> None:
    """Verify connectivity and optionally create missing tables.

    Args:
        create_tables: Override DB_CREATE_TABLES.

    Raises:
        SQLAlchemyError: If the database cannot be reached.
    """
    db_settings = get_db_settings()
    if create_tables is None:
        create_tables = db_settings.create_tables

    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            if create_tables:
                from press_graph.core.models import Base

                await conn.run_sync(Base.metadata.create_all)
    except Exception as e:
        logger.error(
            "Failed to connect to database",
            extra={"url": engine.url.render_as_string(hide_password=True), "error": str(e)},
        )
        raise

    logger.info(
        "Database connection established successfully",
        extra={"url": engine.url.render_as_string(hide_password=True), "create_tables": create_tables},
    )


async def close_database() -> None:
    """Dispose of the engine's connection pool.

    This should be called during application shutdown.
    """
    logger.info("Closing database connection")
    await engine.dispose()


__all__ = [
    "AsyncSessionLocal",
    "build_engine",
    "close_database",
    "engine",
    "get_async_session",
    "init_database",
]
