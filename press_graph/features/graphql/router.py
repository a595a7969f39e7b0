"""GraphQL router for FastAPI integration.

Provides:
- GraphQL endpoint (mounted at ``GraphQLSettings.path`` by the app factory)
- GraphQL IDE (GraphiQL, Apollo Sandbox or Pathfinder) when enabled
- Request context with session, requester, DataLoaders and the connection
  resolver (carrying the configured ``where`` hooks)
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence
from typing import Annotated, Any, cast

from fastapi import BackgroundTasks, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import GraphQLRouter

from press_graph.core.dependencies.database import get_db_session
from press_graph.core.schemas.auth import Requester
from press_graph.core.settings import get_graphql_settings
from press_graph.features.graphql.arguments import ArgsHook, QueryArgumentTranslator
from press_graph.features.graphql.connection import PostObjectsConnectionResolver
from press_graph.features.graphql.context import GraphQLContext
from press_graph.features.graphql.dataloaders import create_dataloaders
from press_graph.features.graphql.schema import schema
from press_graph.infra.logging import set_log_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "x-correlation-id"


async def get_requester() -> Requester:
    """Identity GraphQL requests run as.

    Authentication is outside this service; every request is anonymous
    unless the dependency is overridden (``app.dependency_overrides``).
    """
    return Requester.anonymous()


def build_context_getter(hooks: Sequence[ArgsHook] = ()) -> Any:
    """Create the context getter, binding the ``where`` hooks to the resolver."""
    translator = QueryArgumentTranslator(hooks=hooks)

    async def get_graphql_context(
        request: Request,
        response: Response,
        background_tasks: BackgroundTasks,
        session: Annotated[AsyncSession, Depends(get_db_session)],
        requester: Annotated[Requester, Depends(get_requester)],
    ) -> GraphQLContext:
        """Create GraphQL context from FastAPI dependencies.

        Args:
            request: FastAPI request
            response: FastAPI response (for setting headers/cookies)
            background_tasks: FastAPI background tasks
            session: Database session from dependency
            requester: Identity the request runs as

        Returns:
            GraphQLContext for use in resolvers
        """
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex
        set_log_context(correlation_id=correlation_id)
        response.headers[CORRELATION_HEADER] = correlation_id

        return GraphQLContext(
            request=request,
            response=response,
            background_tasks=background_tasks,
            session=session,
            loaders=create_dataloaders(session, requester),
            requester=requester,
            connections=PostObjectsConnectionResolver(translator=translator),
            correlation_id=correlation_id,
        )

    return get_graphql_context


def create_graphql_router(hooks: Sequence[ArgsHook] = ()) -> GraphQLRouter:
    """Create GraphQL router with settings-based configuration.

    Args:
        hooks: Extension hooks applied to every translated ``where`` input.
    """
    settings = get_graphql_settings()

    graphql_app = GraphQLRouter(
        schema,
        context_getter=cast("Any", build_context_getter(hooks)),
        graphql_ide=settings.graphql_ide or None,
        path="",  # mounted prefix is the endpoint path
    )
    logger.debug("GraphQL router created", extra={"hooks": len(hooks), "ide": settings.graphql_ide})
    return graphql_app


__all__ = ["build_context_getter", "create_graphql_router", "get_requester"]
