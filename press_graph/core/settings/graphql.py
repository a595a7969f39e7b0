"""GraphQL server configuration settings.

Controls the GraphQL endpoint, IDE, connection paging limits and the
behaviour of connection resolvers and batch loaders.
Environment variables use GRAPHQL_ prefix.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

GraphQLIDE = Literal["graphiql", "apollo-sandbox", "pathfinder", False]


class GraphQLSettings(BaseSettings):
    """GraphQL server configuration.

    Environment variables use GRAPHQL_ prefix.
    Example: GRAPHQL_ENABLED=true, GRAPHQL_PATH=/graphql
    """

    # Enable/disable GraphQL
    enabled: bool = Field(
        default=True,
        description="Enable GraphQL endpoint",
    )

    # Endpoint configuration
    path: str = Field(
        default="/graphql",
        min_length=1,
        max_length=255,
        pattern=r"^/.*$",
        description="GraphQL endpoint path",
    )

    graphql_ide: GraphQLIDE = Field(
        default="graphiql",
        description="GraphQL IDE to use: graphiql, apollo-sandbox, pathfinder, or false to disable",
    )

    # Pagination defaults
    default_page_size: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Page size for connections queried without first/last",
    )
    max_page_size: int = Field(
        default=100,
        ge=10,
        le=1000,
        description="Upper bound applied to first/last",
    )

    # Resolver behaviour
    empty_connection_error: bool = Field(
        default=True,
        description="Raise EmptyResultError when nothing matches; when false an empty connection is returned",
    )
    batch_isolate_errors: bool = Field(
        default=False,
        description=(
            "Report missing batch-loader keys per key; when false the first missing "
            "key aborts the whole batch"
        ),
    )

    # Introspection (security)
    introspection_enabled: bool = Field(
        default=True,
        description="Enable GraphQL schema introspection (disable in production for security)",
    )

    model_config = SettingsConfigDict(
        env_prefix="GRAPHQL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    @model_validator(mode="after")
    def validate_page_sizes(self) -> GraphQLSettings:
        """Validate that the default page size fits under the cap."""
        if self.default_page_size > self.max_page_size:
            msg = "default_page_size cannot exceed max_page_size"
            raise ValueError(msg)
        return self

    @property
    def playground_enabled(self) -> bool:
        """Check if the GraphQL IDE is enabled."""
        return self.graphql_ide is not False
