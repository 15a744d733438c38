"""Upload service: store a file in Cloud Storage and return its public URL."""

from __future__ import annotations

import logging
import os
import re
from typing import TYPE_CHECKING

from app.application.dtos.upload import SignedUploadResult, UploadResult
from app.domain.enums import UploadType
from app.domain.exceptions import PayloadTooLargeException, ValidationException
from app.shared.utils.datetime import epoch_ms

if TYPE_CHECKING:
    from app.infrastructure.external.storage.protocol import StorageProtocol

DEFAULT_DESTINATION = "general"
_DESTINATION = re.compile(r"^[A-Za-z0-9_-]+(/[A-Za-z0-9_-]+)*$")


def _sanitize_filename(filename: str) -> str:
    """Strip path separators and dangerous characters from filename."""
    name = os.path.basename(filename.replace("\\", "/"))
    name = name.replace("\x00", "").strip(". ")
    if not name:
        raise ValidationException("Filename is empty or invalid", field="filename")
    return name


def validate_destination(destination: str) -> str:
    """Normalised destination folder, or ValidationException."""
    destination = destination.strip().strip("/")
    if not _DESTINATION.match(destination):
        raise ValidationException(
            "Destination must be one or more folder names (letters, digits, '-', '_')",
            field="destination",
        )
    return destination


def build_storage_path(destination: str, filename: str) -> str:
    """<destination>/<epoch-ms>_<sanitised filename>."""
    return f"{validate_destination(destination)}/{epoch_ms()}_{_sanitize_filename(filename)}"


def is_banner_destination(destination: str) -> bool:
    """True for banners/ and any folder below it."""
    folder = UploadType.BANNER.folder
    return destination == folder or destination.startswith(f"{folder}/")


class UploadService:
    """Direct uploads (bytes through the API) and signed uploads (client PUTs to the bucket)."""

    def __init__(
        self,
        storage: "StorageProtocol",
        max_upload_size: int,
        signed_url_expiration_seconds: int = 600,
        logger: logging.Logger | None = None,
    ) -> None:
        self._storage = storage
        self._max_upload_size = max_upload_size
        self._expiration = signed_url_expiration_seconds
        self._logger = logger or logging.getLogger(__name__)

    async def store(
        self,
        data: bytes,
        content_type: str | None,
        original_name: str,
        destination: str = DEFAULT_DESTINATION,
    ) -> UploadResult:
        """Upload data and make it publicly readable.

        The size ceiling is checked before anything is written; the object
        is made public only after the upload request completed.

        Raises:
            PayloadTooLargeException: data exceeds max_upload_size.
            ValidationException: empty file, bad filename or destination.
            StorageException: the bucket rejected the upload or ACL change.
        """
        if len(data) > self._max_upload_size:
            raise PayloadTooLargeException(self._max_upload_size, len(data))
        if not data:
            raise ValidationException("No file uploaded", field="file")
        storage_path = build_storage_path(destination, original_name)
        await self._storage.upload(
            storage_path, data, content_type or "application/octet-stream"
        )
        await self._storage.make_public(storage_path)
        self._logger.info("Stored upload %s (%d bytes)", storage_path, len(data))
        return UploadResult(url=self._storage.public_url(storage_path), storage_path=storage_path)

    async def create_signed_upload(
        self, upload_type: str, filename: str, content_type: str
    ) -> SignedUploadResult:
        """Signed PUT URL for banners/ or reports/.

        Raises:
            ValidationException: unknown type or missing filename/contentType.
        """
        try:
            kind = UploadType(upload_type)
        except ValueError:
            raise ValidationException(
                "Invalid type. Must be 'report' or 'banner'.", field="type"
            ) from None
        if not content_type:
            raise ValidationException("contentType is required", field="contentType")
        storage_path = build_storage_path(kind.folder, filename)
        url = await self._storage.generate_upload_url(storage_path, content_type, self._expiration)
        return SignedUploadResult(upload_url=url, storage_path=storage_path)
