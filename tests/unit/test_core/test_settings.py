"""Unit tests for modular Pydantic Settings v2."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from press_graph.core.settings import (
    clear_settings_cache,
    get_graphql_settings,
    get_logging_settings,
)
from press_graph.core.settings.app import AppSettings
from press_graph.core.settings.database import DatabaseSettings
from press_graph.core.settings.graphql import GraphQLSettings
from press_graph.core.settings.logs import LoggingSettings


@pytest.fixture(autouse=True)
def _fresh_settings():
    clear_settings_cache()
    yield
    clear_settings_cache()


class TestAppSettings:
    """Test suite for AppSettings."""

    def test_app_settings_defaults(self):
        settings = AppSettings()

        assert settings.service_name == "press-graph"
        assert settings.environment == "test"  # From env var in conftest
        assert settings.is_production is False

    def test_app_settings_frozen(self):
        settings = AppSettings()

        with pytest.raises(ValidationError):
            settings.debug = True

    def test_debug_rejected_in_production(self):
        with pytest.raises(ValidationError, match="Debug mode"):
            AppSettings(environment="production", debug=True)


class TestDatabaseSettings:
    """Test suite for DatabaseSettings."""

    def test_sqlite_detection(self):
        assert DatabaseSettings(database_url="sqlite+aiosqlite:///:memory:").is_sqlite is True
        assert DatabaseSettings(database_url="postgresql+psycopg://u:p@db/x").is_sqlite is False


class TestGraphQLSettings:
    """Test suite for GraphQLSettings."""

    def test_defaults(self):
        settings = GraphQLSettings()

        assert settings.path == "/graphql"
        assert settings.default_page_size == 10
        assert settings.max_page_size == 100
        assert settings.empty_connection_error is True
        assert settings.batch_isolate_errors is False
        assert settings.playground_enabled is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("GRAPHQL_EMPTY_CONNECTION_ERROR", "false")
        monkeypatch.setenv("GRAPHQL_MAX_PAGE_SIZE", "50")

        settings = get_graphql_settings()

        assert settings.empty_connection_error is False
        assert settings.max_page_size == 50

    def test_default_page_size_cannot_exceed_cap(self):
        with pytest.raises(ValidationError, match="default_page_size"):
            GraphQLSettings(default_page_size=50, max_page_size=20)

    def test_path_must_be_absolute(self):
        with pytest.raises(ValidationError):
            GraphQLSettings(path="graphql")

    def test_ide_can_be_disabled(self):
        assert GraphQLSettings(graphql_ide=False).playground_enabled is False


class TestLoggingSettings:
    """Test suite for LoggingSettings."""

    def test_level_normalized(self):
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_level_int(self):
        import logging

        assert LoggingSettings(level="WARNING").level_int == logging.WARNING

    def test_cached_loader_returns_same_instance(self):
        assert get_logging_settings() is get_logging_settings()
