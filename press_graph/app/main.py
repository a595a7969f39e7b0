"""FastAPI application factory."""

from __future__ import annotations

from collections.abc import Sequence

from fastapi import FastAPI

from press_graph.app.lifespan import lifespan
from press_graph.core.settings import get_app_settings, get_graphql_settings
from press_graph.features.graphql.arguments import ArgsHook


def create_app(hooks: Sequence[ArgsHook] = ()) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        hooks: Extension hooks applied to every translated ``where`` input.

    Returns:
        Configured FastAPI application instance.
    """
    app_settings = get_app_settings()

    app = FastAPI(
        title=app_settings.title,
        version=app_settings.version,
        root_path=app_settings.root_path,
        debug=app_settings.debug,
        lifespan=lifespan,
    )

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok", "service": app_settings.service_name}

    graphql_settings = get_graphql_settings()
    if graphql_settings.enabled:
        from press_graph.features.graphql.router import create_graphql_router

        app.include_router(
            create_graphql_router(hooks),
            prefix=graphql_settings.path,
            tags=["graphql"],
        )

    return app


# Application instance for uvicorn
app = create_app()
