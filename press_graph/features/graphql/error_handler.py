"""GraphQL error handling and production error masking.

Errors raised from resolvers are logged server-side with full details.
Domain errors (``AppException`` subclasses) stay user-facing and carry their
``type`` as ``extensions.code``; any other error is masked in production.

Usage:
    schema = PressGraphSchema(
        query=Query,
        extensions=[AppErrorExtension],
    )
"""

from __future__ import annotations

import logging
import traceback
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from graphql import GraphQLError
from strawberry.extensions import SchemaExtension

from press_graph.core.exceptions import AppException
from press_graph.core.settings import get_app_settings

if TYPE_CHECKING:
    from strawberry.types import ExecutionContext

logger = logging.getLogger(__name__)

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"
INTERNAL_ERROR_MESSAGE = "An internal error occurred. Please try again later."


def is_user_facing_error(error: GraphQLError) -> bool:
    """Determine if error should be shown to the user as-is.

    Parse and validation errors (no original exception) and domain errors
    are user-facing; everything else is internal.
    """
    original = error.original_error
    return original is None or isinstance(original, AppException | GraphQLError)


def enrich_error(error: GraphQLError) -> GraphQLError:
    """Attach ``code`` and ``status`` from a domain exception to the extensions."""
    original = error.original_error
    if isinstance(original, AppException):
        error.extensions = {
            **(error.extensions or {}),
            "code": original.type,
            "status": original.status_code,
            **original.extra,
        }
    return error


def mask_internal_error(error: GraphQLError) -> GraphQLError:
    """Replace an internal error with a generic one, keeping location and path."""
    return GraphQLError(
        INTERNAL_ERROR_MESSAGE,
        nodes=error.nodes,
        source=error.source,
        positions=error.positions,
        path=error.path,
        extensions={"code": INTERNAL_ERROR_CODE},
    )


def log_error(error: GraphQLError, execution_context: ExecutionContext | None = None) -> None:
    """Log error with full details for server-side debugging."""
    log_context: dict[str, Any] = {
        "error_message": error.message,
        "error_path": error.path,
    }

    if execution_context is not None:
        if execution_context.operation_name:
            log_context["operation_name"] = execution_context.operation_name
        context = execution_context.context
        correlation_id = getattr(context, "correlation_id", None)
        if correlation_id:
            log_context["correlation_id"] = correlation_id
        requester = getattr(context, "requester", None)
        if requester is not None and requester.user_id is not None:
            log_context["user_id"] = requester.user_id

    original = error.original_error
    if original is not None:
        log_context["exception_type"] = type(original).__name__
        if isinstance(original, AppException):
            log_context["error_type"] = original.type

    if is_user_facing_error(error):
        # Expected errors (bad arguments, missing entities)
        logger.info("GraphQL user-facing error", extra=log_context)
    else:
        log_context["stack_trace"] = "".join(
            traceback.format_exception(type(original), original, original.__traceback__)
        )
        logger.error("GraphQL internal error", extra=log_context)


def process_graphql_errors(
    errors: list[GraphQLError],
    execution_context: ExecutionContext | None = None,
) -> list[GraphQLError]:
    """Log errors and make them safe to return to the client.

    Args:
        errors: List of GraphQL errors from execution
        execution_context: Execution context with operation info

    Returns:
        Errors with codes attached; internal errors masked in production
    """
    is_production = get_app_settings().is_production
    processed = []
    for error in errors:
        if is_user_facing_error(error):
            processed.append(enrich_error(error))
        elif is_production:
            processed.append(mask_internal_error(error))
        else:
            error.extensions = {
                **(error.extensions or {}),
                "code": INTERNAL_ERROR_CODE,
                "debug": {
                    "exception_type": type(error.original_error).__name__,
                    "exception_message": str(error.original_error),
                },
            }
            processed.append(error)
    return processed


class AppErrorExtension(SchemaExtension):
    """Rewrite execution errors once the operation has finished."""

    def on_operation(self) -> Iterator[None]:
        yield
        result = self.execution_context.result
        if result is not None and result.errors:
            result.errors = process_graphql_errors(result.errors, self.execution_context)


__all__ = [
    "AppErrorExtension",
    "enrich_error",
    "is_user_facing_error",
    "log_error",
    "mask_internal_error",
    "process_graphql_errors",
]
