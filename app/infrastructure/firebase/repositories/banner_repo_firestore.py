"""Firestore-backed banner repository."""

from __future__ import annotations

from typing import Any

from app.application.dtos.banner import BannerResult
from app.infrastructure.firebase.collections import COLLECTION_BANNERS
from app.infrastructure.firebase.repositories._base import (
    FirestoreCrudRepository,
    as_datetime,
    optional_str,
)
from app.shared.telemetry.tracing import traced


class FirestoreBannerRepository(FirestoreCrudRepository[BannerResult]):
    """Banners, newest first. storagePath and url are required."""

    collection_name = COLLECTION_BANNERS

    def _to_result(self, doc_id: str, data: dict[str, Any]) -> BannerResult:
        return BannerResult(
            id=doc_id,
            storage_path=self._required(doc_id, data, "storagePath"),
            url=self._required(doc_id, data, "url"),
            alt=data.get("alt") or "",
            link=data.get("link") or "",
            content_type=optional_str(data.get("contentType")),
            is_active=data.get("isActive") is True,
            created_at=as_datetime(data.get("createdAt")),
            updated_at=as_datetime(data.get("updatedAt")),
        )

    @traced("firestore.banners.list_active")
    async def list_active(self) -> list[BannerResult]:
        query = self._coll.where("isActive", "==", True)
        return self._sorted([self._to_result(s.id, s.to_dict()) async for s in query.stream()])
