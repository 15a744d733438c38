"""Infrastructure exceptions for storage and identity-provider operations.

Errors extend the domain taxonomy so presentation can map them to HTTP
responses consistently: upstream failures become a generic 500, token
failures a 401.
"""

from app.domain.exceptions import AuthenticationException, UpstreamException


class StorageException(UpstreamException):
    """Base exception for blob storage operations."""


class StorageUploadError(StorageException):
    """Object upload failed."""

    def __init__(self, storage_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to upload file: {storage_path}",
            "STORAGE_UPLOAD_ERROR",
            {"storage_path": storage_path, "reason": reason},
        )


class StorageDeleteError(StorageException):
    """Object deletion failed (other than not found)."""

    def __init__(self, storage_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to delete file: {storage_path}",
            "STORAGE_DELETE_ERROR",
            {"storage_path": storage_path, "reason": reason},
        )


class StorageRequestError(StorageException):
    """Any other Cloud Storage API failure (metadata, ACL, signing)."""

    def __init__(self, storage_path: str, operation: str, reason: str) -> None:
        super().__init__(
            f"Storage {operation} failed for: {storage_path}",
            "STORAGE_ERROR",
            {"storage_path": storage_path, "operation": operation, "reason": reason},
        )


class IdentityProviderError(UpstreamException):
    """Identity Toolkit returned an error.

    provider_code is the Identity Toolkit error code (e.g. EMAIL_EXISTS,
    USER_NOT_FOUND, WEAK_PASSWORD); services translate the whitelisted
    ones into 4xx domain exceptions.
    """

    def __init__(self, provider_code: str, message: str, status_code: int | None = None) -> None:
        self.provider_code = provider_code
        self.status_code = status_code
        super().__init__(
            f"Identity provider error: {provider_code}",
            "IDENTITY_PROVIDER_ERROR",
            {"provider_code": provider_code, "provider_message": message},
        )


class InvalidIdTokenError(AuthenticationException):
    """Bearer token failed verification (signature, expiry, audience, issuer, revocation)."""

    def __init__(self, reason: str = "Invalid or expired token") -> None:
        super().__init__(reason)
