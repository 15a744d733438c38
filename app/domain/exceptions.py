"""Domain exceptions for the content API.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class ContentApiException(Exception):
    """Base exception for all content API errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
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
        """Response body for this error."""
        body: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationException(ContentApiException):
    """Raised when input validation fails. Carries every failing field."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        errors: list[dict[str, str]] | None = None,
    ) -> None:
        """Initialize with message and the failing field(s).

        Args:
            message: Description of the validation failure.
            field: Optional single field that failed validation.
            errors: Optional list of {"field", "message"} entries.
        """
        if errors is None and field:
            errors = [{"field": field, "message": message}]
        self.errors = errors or []
        details: dict[str, Any] = {"errors": self.errors} if self.errors else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(ContentApiException):
    """Raised when the bearer token is missing, malformed, expired or revoked."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(ContentApiException):
    """Raised when a verified identity lacks the admin claim."""

    def __init__(
        self,
        resource: str | None = None,
        action: str | None = None,
        message: str = "Admin only",
    ) -> None:
        """Initialize with optional resource, action, and message.

        Args:
            resource: Optional resource (e.g. 'banners').
            action: Optional action that was attempted (e.g. 'upload').
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


class ResourceNotFoundException(ContentApiException):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        message: str | None = None,
    ) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'post', 'user').
            resource_id: The ID that was not found.
            message: Optional public message (e.g. 'Post não encontrado').
        """
        super().__init__(
            message or f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ConflictException(ContentApiException):
    """Raised when a unique value (e.g. user email) is already taken."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "CONFLICT", details)


class PayloadTooLargeException(ContentApiException):
    """Raised when an upload exceeds the configured size ceiling."""

    def __init__(self, max_bytes: int, actual: int) -> None:
        super().__init__(
            f"File must be at most {max_bytes} bytes",
            "PAYLOAD_TOO_LARGE",
            {"max_bytes": max_bytes, "size": actual},
        )


class UpstreamException(ContentApiException):
    """Raised when the store, blob store or identity provider fails unexpectedly.

    Never shown verbatim to the caller; handlers log it and return a generic 500.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "UPSTREAM_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details)


class DataIntegrityException(ContentApiException):
    """Raised when a stored document lacks a required field."""

    def __init__(self, collection: str, document_id: str, field: str) -> None:
        """Initialize with the offending document and field.

        Args:
            collection: Firestore collection name.
            document_id: Document that failed mapping.
            field: Required field missing from the stored document.
        """
        super().__init__(
            f"Document {collection}/{document_id} is missing required field '{field}'",
            "DATA_INTEGRITY_ERROR",
            {"collection": collection, "document_id": document_id, "field": field},
        )
