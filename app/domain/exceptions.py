"""Domain exceptions for the catalog.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.

Validation failures of a single mutation are NOT raised: use cases return a
Notification instead. DomainException is for failures that must abort the
request (not found, invalid search parameters).
"""

from typing import Any

from app.domain.validation import Error


class CatalogException(Exception):
    """Base exception for all catalog application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation (error, message, details)."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class DomainException(CatalogException):
    """Raised when a domain rule aborts the operation; carries the error list."""

    def __init__(
        self,
        message: str,
        errors: list[Error] | None = None,
        error_code: str = "DOMAIN_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with message and the errors that caused it.

        Args:
            message: Human-readable description (usually the first error).
            errors: Errors to report; defaults to empty.
            error_code: Machine-readable code.
            details: Optional extra context.
        """
        self.errors: list[Error] = list(errors or [])
        super().__init__(message, error_code, details)

    @classmethod
    def with_error(cls, error: Error) -> "DomainException":
        """Build from a single error; message is the error message."""
        return cls(error.message, [error])

    @classmethod
    def with_errors(cls, errors: list[Error]) -> "DomainException":
        """Build from several errors; message is the first one (or empty)."""
        message = errors[0].message if errors else ""
        return cls(message, errors)


class NotFoundException(DomainException):
    """Raised when an aggregate ID has no stored record.

    Message convention: "<Kind> with ID <id> not found".
    """

    def __init__(self, kind: str, resource_id: str) -> None:
        """Initialize with aggregate kind and the missing ID.

        Args:
            kind: Aggregate name (e.g. 'Category', 'Genre').
            resource_id: The ID that was not found.
        """
        self.kind = kind
        self.resource_id = resource_id
        super().__init__(
            f"{kind} with ID {resource_id} not found",
            [],
            "RESOURCE_NOT_FOUND",
            {"resource_type": kind, "resource_id": resource_id},
        )

    @classmethod
    def of(cls, aggregate: type, resource_id: str) -> "NotFoundException":
        """Build from the aggregate class (kind = class name)."""
        return cls(aggregate.__name__, resource_id)


class SqlNotConfiguredException(CatalogException):
    """Raised when an operation requires Postgres but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
