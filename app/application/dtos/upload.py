"""DTOs for file uploads."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UploadResult:
    """A stored, publicly readable blob."""

    url: str
    storage_path: str


@dataclass(frozen=True)
class SignedUploadResult:
    """A V4 signed PUT URL the client uploads to directly."""

    upload_url: str
    storage_path: str
