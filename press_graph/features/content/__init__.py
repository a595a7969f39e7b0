"""Content store access: query parameters, the data source and projections."""

from .params import QueryParams, QueryResult
from .projections import EntityView, MenuItemView, PostView, UserView, project
from .query import ContentQuery

__all__ = [
    "ContentQuery",
    "EntityView",
    "MenuItemView",
    "PostView",
    "QueryParams",
    "QueryResult",
    "UserView",
    "project",
]
