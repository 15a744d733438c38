"""Banner application service: confirm an uploaded blob as a banner, delete both."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.application.dtos.banner import BannerResult
from app.domain.exceptions import ValidationException

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IBannerRepository
    from app.infrastructure.external.storage.protocol import StorageProtocol


class BannerService:
    """Keeps the banners collection and the bucket in step."""

    def __init__(
        self,
        banner_repo: "IBannerRepository",
        storage: "StorageProtocol",
        logger: logging.Logger | None = None,
    ) -> None:
        self._banner_repo = banner_repo
        self._storage = storage
        self._logger = logger or logging.getLogger(__name__)

    async def confirm(self, data: dict[str, Any]) -> BannerResult:
        """Make the uploaded blob public and record the banner.

        Raises:
            ValidationException: storagePath does not reference an existing blob.
        """
        storage_path = data["storagePath"]
        metadata = await self._storage.get_metadata(storage_path)
        if metadata is None:
            raise ValidationException(
                "Arquivo não encontrado no Storage", field="storagePath"
            )
        await self._storage.make_public(storage_path)
        return await self._banner_repo.create(
            {
                **data,
                "url": self._storage.public_url(storage_path),
                "contentType": metadata.get("contentType"),
            }
        )

    async def delete(self, banner_id: str) -> bool:
        """Delete the blob (missing blob is fine) and then the record. False if no such banner."""
        banner = await self._banner_repo.get_by_id(banner_id)
        if banner is None:
            return False
        removed = await self._storage.delete(banner.storage_path, ignore_not_found=True)
        if not removed:
            self._logger.warning(
                "Banner %s referenced a missing blob: %s", banner_id, banner.storage_path
            )
        return await self._banner_repo.delete(banner_id)
