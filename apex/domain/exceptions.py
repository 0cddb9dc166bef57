"""Domain exceptions for the Apex application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. The request
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class ApexException(Exception):
    """Base exception for all Apex application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. The request layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
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
        """Return a JSON-serializable body: error, message, details."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(ApexException):
    """Raised when input validation fails (e.g. empty name, missing update field)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthorizationException(ApexException):
    """Raised when the caller does not own the resource (or its parent report)."""

    def __init__(
        self,
        resource: str | None = None,
        action: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with optional resource, action, and message.

        Args:
            resource: Optional resource type (e.g. 'report', 'document').
            action: Optional action that was attempted (e.g. 'read', 'delete').
            message: Human-readable message; default used when resource/action omitted.
        """
        if resource and action:
            message = f"Permission denied: {action} on {resource}"
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(ApexException):
    """Raised when a requested resource does not exist or is soft-deleted."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'report', 'document').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class DuplicateDocumentException(ApexException):
    """Raised when a report already has an active document with the same content hash."""

    def __init__(self, report_id: str, content_hash: str) -> None:
        super().__init__(
            "Document already exists in this report",
            "DOCUMENT_ALREADY_EXISTS",
            {"report_id": report_id, "content_hash": content_hash},
        )
