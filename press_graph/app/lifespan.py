"""Application lifespan management.

Startup Order:
1. Logging - always runs first
2. Database - connectivity check, optional table creation

Shutdown Order: Reverse of startup
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from press_graph.core.settings import get_app_settings, get_graphql_settings, get_logging_settings
from press_graph.infra.logging.config import setup_logging

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Start and stop application services.

    Args:
        app: FastAPI application instance.
    """
    app_settings = get_app_settings()
    setup_logging(get_logging_settings(), service_name=app_settings.service_name)

    # Lazy import so the engine is built after settings/logging are ready
    from press_graph.infra.database import close_database, init_database

    await init_database()
    logger.info(
        "Application started",
        extra={
            "service": app_settings.service_name,
            "version": app_settings.version,
            "environment": app_settings.environment,
            "graphql_path": get_graphql_settings().path,
        },
    )
    try:
        yield
    finally:
        await close_database()
        logger.info("Application stopped", extra={"service": app_settings.service_name})
