"""Custom exception classes for the application."""

from __future__ import annotations

from typing import Any


class AppException(Exception):
    """Base application exception.

    All custom exceptions should inherit from this class.
    Follows RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        status_code: HTTP status code for the error.
        detail: Human-readable error message.
        type: Error type identifier (used in RFC 7807 problem details and
            as the GraphQL ``extensions.code``).
        title: Short, human-readable summary of the problem type.
        instance: URI reference that identifies the specific occurrence of the problem.
        extra: Additional context-specific information about the error.

    Example:
            raise AppException(
            status_code=404,
            detail="Resource not found",
            type="resource-not-found",
            extra={"resource_id": 42, "resource_type": "post"}
        )
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        type: str = "about:blank",
        title: str | None = None,
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize application exception.

        Args:
            status_code: HTTP status code.
            detail: Human-readable error message.
            type: Error type identifier.
            title: Short summary of the problem type.
            instance: URI reference identifying this specific occurrence.
            extra: Additional context about the error.
        """
        self.status_code = status_code
        self.detail = detail
        self.type = type
        self.title = title or self._default_title(status_code)
        self.instance = instance
        self.extra = extra or {}
        super().__init__(detail)

    @staticmethod
    def _default_title(status_code: int) -> str:
        """Get default title for HTTP status code.

        Args:
            status_code: HTTP status code.

        Returns:
            Human-readable title for the status code.
        """
        titles = {
            400: "Bad Request",
            401: "Unauthorized",
            403: "Forbidden",
            404: "Not Found",
            409: "Conflict",
            422: "Unprocessable Entity",
            500: "Internal Server Error",
            503: "Service Unavailable",
        }
        return titles.get(status_code, "Error")


class NotFoundException(AppException):
    """Exception raised when a resource is not found.

    Example:
            raise NotFoundException(
            detail="No post exists with id: 12",
            type="post-not-found",
            extra={"id": 12}
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "not-found",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize not found exception.

        Args:
            detail: Human-readable error message.
            type: Error type identifier.
            instance: URI reference identifying this specific occurrence.
            extra: Additional context about the error.
        """
        super().__init__(
            status_code=404,
            detail=detail,
            type=type,
            title="Not Found",
            instance=instance,
            extra=extra,
        )


class ValidationException(AppException):
    """Exception raised for validation errors.

    Example:
            raise ValidationException(
            detail="first must be a non-negative integer",
            type="validation-error",
            extra={"field": "first", "value": -1}
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "validation-error",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation exception.

        Args:
            detail: Human-readable error message.
            type: Error type identifier.
            instance: URI reference identifying this specific occurrence.
            extra: Additional context about the error.
        """
        super().__init__(
            status_code=422,
            detail=detail,
            type=type,
            title="Validation Error",
            instance=instance,
            extra=extra,
        )


# ============================================================================
# Connection and Loader Exceptions
# ============================================================================


class ArgumentConflictError(ValidationException):
    """Raised when pagination arguments point in both directions at once.

    Example:
        raise ArgumentConflictError("first", "last")
    """

    def __init__(
        self,
        first_argument: str,
        second_argument: str,
        instance: str | None = None,
    ) -> None:
        """Initialize argument conflict exception."""
        detail = (
            f'"{first_argument.capitalize()}" and "{second_argument.capitalize()}" '
            "should not be used together in arguments."
        )
        super().__init__(
            detail=detail,
            type="argument-conflict",
            instance=instance,
            extra={"arguments": [first_argument, second_argument]},
        )


class EmptyResultError(NotFoundException):
    """Raised when a connection query matches no records.

    Raised while ``GraphQLSettings.empty_connection_error`` is enabled (the
    default); with it disabled empty connections are returned as valid results.
    """

    def __init__(
        self,
        post_type: str | list[str],
        instance: str | None = None,
    ) -> None:
        """Initialize empty result exception."""
        super().__init__(
            detail="No results were found for the query. Try broadening the arguments.",
            type="empty-result",
            instance=instance,
            extra={"post_type": post_type},
        )


class EntityNotFoundError(NotFoundException):
    """Raised (or returned as a marker) when a batch-loaded key has no record.

    Example:
        raise EntityNotFoundError("nav_menu_item", 999)
    """

    def __init__(
        self,
        entity_type: str,
        key: Any,
        instance: str | None = None,
    ) -> None:
        """Initialize entity not found exception."""
        self.entity_type = entity_type
        self.key = key
        super().__init__(
            detail=f"No {entity_type} exists with id: {key}",
            type="entity-not-found",
            instance=instance,
            extra={"entity_type": entity_type, "id": key},
        )


__all__ = [
    "AppException",
    "ArgumentConflictError",
    "EmptyResultError",
    "EntityNotFoundError",
    "NotFoundException",
    "ValidationException",
]
