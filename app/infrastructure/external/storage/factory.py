"""Storage service factory: creates the Cloud Storage backend from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.infrastructure.external.storage.protocol import StorageProtocol

if TYPE_CHECKING:
    import httpx

    from app.core.config import Settings


class StorageFactory:
    """Factory for storage service instances based on configuration."""

    @staticmethod
    def create_storage_service(
        credentials: Any,
        settings: "Settings | None" = None,
        http_client: "httpx.AsyncClient | None" = None,
    ) -> StorageProtocol:
        """Create storage service from settings.

        Args:
            credentials: Service account credentials (token + signing).
            settings: Application settings; if None, uses get_settings().
            http_client: Optional shared HTTP client.

        Returns:
            GCSStorageService for FIREBASE_STORAGE_BUCKET.

        Raises:
            ValueError: FIREBASE_STORAGE_BUCKET is not configured.
        """
        from app.core.config import get_settings
        from app.infrastructure.external.storage.gcs_storage import GCSStorageService

        s = settings or get_settings()
        if not s.firebase_storage_bucket:
            raise ValueError("FIREBASE_STORAGE_BUCKET required for uploads")
        return GCSStorageService(
            bucket=s.firebase_storage_bucket,
            credentials=credentials,
            http_client=http_client,
        )
