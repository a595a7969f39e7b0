"""GraphQL context for request-scoped dependencies.

The context is created fresh for each GraphQL request and provides:
- Database session (for queries)
- DataLoaders (for N+1 prevention)
- The requester (for field visibility)
- The connection resolver (with the configured ``where`` hooks)
- Correlation ID (for log correlation)

Following Strawberry's FastAPI integration pattern:
https://strawberry.rocks/docs/integrations/fastapi#context_getter
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from strawberry.fastapi import BaseContext

from press_graph.core.schemas.auth import Requester

from .connection import PostObjectsConnectionResolver, RequestContext

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession
    from starlette.background import BackgroundTasks
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.websockets import WebSocket

    from .dataloaders import DataLoaders


@dataclass
class GraphQLContext(BaseContext):
    """Request context for GraphQL operations.

    Standard fields (per Strawberry docs):
    - request: The HTTP request (or None outside HTTP, e.g. in tests)
    - response: The HTTP response (for setting headers/cookies)
    - background_tasks: FastAPI BackgroundTasks for async operations

    Custom fields:
    - session: Database session (request-scoped)
    - loaders: DataLoaders (request-scoped, tied to session)
    - requester: Identity the request runs as
    - connections: Connection resolver shared by every connection field
    - correlation_id: For log correlation

    Example usage in resolver:
        @strawberry.field
        async def menu_item(self, info: Info[GraphQLContext, None], id: strawberry.ID) -> MenuItemType:
            view = await info.context.loaders.menu_items.load(decode_id(id))
            return MenuItemType(view=view)
    """

    # Standard Strawberry/FastAPI context fields
    request: Request | WebSocket | None = None
    response: Response | None = None
    background_tasks: BackgroundTasks | None = None

    # Custom application fields
    session: AsyncSession = field(default=None)  # type: ignore[assignment]
    loaders: DataLoaders = field(default=None)  # type: ignore[assignment]
    requester: Requester = field(default_factory=Requester.anonymous)
    connections: PostObjectsConnectionResolver = field(default_factory=PostObjectsConnectionResolver)
    correlation_id: str | None = None

    @property
    def is_authenticated(self) -> bool:
        """Check if the request runs as a known user."""
        return self.requester.is_authenticated

    def request_context(self, page_info_selected: bool = False) -> RequestContext:
        """Resolver-facing view of this context."""
        return RequestContext(
            session=self.session,
            requester=self.requester,
            page_info_selected=page_info_selected,
            extra={"correlation_id": self.correlation_id},
        )


__all__ = ["GraphQLContext"]
