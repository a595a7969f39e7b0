"""GraphQL schema assembly."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import strawberry
from strawberry.extensions import DisableIntrospection

from press_graph.core.settings import get_graphql_settings
from press_graph.features.graphql.error_handler import AppErrorExtension, log_error
from press_graph.features.graphql.resolvers import Query
from press_graph.features.graphql.types import PageType, PostType

if TYPE_CHECKING:
    from graphql import GraphQLError
    from strawberry.types import ExecutionContext

logger = logging.getLogger(__name__)


class PressGraphSchema(strawberry.Schema):
    """Schema that logs errors through the application logger."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            log_error(error, execution_context)


def get_extensions() -> list:
    """Schema extensions according to GraphQL settings."""
    extensions: list = [AppErrorExtension]
    if not get_graphql_settings().introspection_enabled:
        extensions.append(DisableIntrospection)
    return extensions


schema = PressGraphSchema(
    query=Query,
    types=[PostType, PageType],
    extensions=get_extensions(),
)

logger.debug("GraphQL schema created")

__all__ = ["PressGraphSchema", "get_extensions", "schema"]
