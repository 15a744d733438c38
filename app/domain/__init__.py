"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import ReportStatus, SectionType, UploadType
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ConflictException,
    ContentApiException,
    DataIntegrityException,
    PayloadTooLargeException,
    ResourceNotFoundException,
    UpstreamException,
    ValidationException,
)

__all__ = [
    # Enums
    "ReportStatus",
    "SectionType",
    "UploadType",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "ConflictException",
    "ContentApiException",
    "DataIntegrityException",
    "PayloadTooLargeException",
    "ResourceNotFoundException",
    "UpstreamException",
    "ValidationException",
]
