"""Modular Pydantic Settings v2 configuration.

Each domain has its own frozen settings model with an environment prefix:
- APP_: service identity and environment
- DB_: async database URL and pool
- GRAPHQL_: endpoint, paging limits, resolver behaviour
- LOG_: logging level, format and destinations

Import settings via the cached loaders:
    from press_graph.core.settings import get_graphql_settings
"""

from __future__ import annotations

from .app import AppSettings
from .database import DatabaseSettings
from .graphql import GraphQLSettings
from .loader import (
    clear_settings_cache,
    get_app_settings,
    get_db_settings,
    get_graphql_settings,
    get_logging_settings,
)
from .logs import LoggingSettings

__all__ = [
    "AppSettings",
    "DatabaseSettings",
    "GraphQLSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_app_settings",
    "get_db_settings",
    "get_graphql_settings",
    "get_logging_settings",
]
