"""Storage service protocol (DIP). Implementation: GCSStorageService."""

from typing import Any, Protocol


class StorageProtocol(Protocol):
    """Protocol for the blob store backing uploads and banners."""

    @property
    def bucket(self) -> str:
        """Bucket name (part of every public URL)."""
        ...

    async def upload(self, storage_path: str, data: bytes, content_type: str) -> dict[str, Any]:
        """Write the object in a single request (non-resumable). Returns object metadata."""
        ...

    async def make_public(self, storage_path: str) -> None:
        """Grant allUsers read access to the object."""
        ...

    async def get_metadata(self, storage_path: str) -> dict[str, Any] | None:
        """Return object metadata, or None if the object does not exist."""
        ...

    async def delete(self, storage_path: str, ignore_not_found: bool = True) -> bool:
        """Delete the object. Returns False when it was already missing."""
        ...

    def public_url(self, storage_path: str) -> str:
        """Deterministic public URL for the object."""
        ...

    async def generate_upload_url(
        self,
        storage_path: str,
        content_type: str,
        expiration_seconds: int,
    ) -> str:
        """Return a V4 signed URL allowing a PUT of content_type to storage_path."""
        ...
