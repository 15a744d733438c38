"""Storage: Cloud Storage backend for uploads and banner blobs.

StorageFactory creates the backend from app.core.config. The
implementation satisfies StorageProtocol (upload, make_public,
get_metadata, delete, public_url, generate_upload_url).
"""

from app.infrastructure.external.storage.factory import StorageFactory
from app.infrastructure.external.storage.protocol import StorageProtocol

__all__ = [
    "StorageFactory",
    "StorageProtocol",
]
