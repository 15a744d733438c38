"""Firestore-backed section repository (publicContent)."""

from __future__ import annotations

from typing import Any

from app.application.dtos.section import SectionResult
from app.application.services.order_assignment import coerce_order
from app.domain.enums import SectionType
from app.domain.exceptions import DataIntegrityException
from app.infrastructure.firebase.collections import COLLECTION_SECTIONS
from app.infrastructure.firebase.repositories._base import (
    FirestoreCrudRepository,
    as_datetime,
)
from app.shared.telemetry.tracing import traced

_SHARED_FIELDS = frozenset({"id", "type", "order", "isActive", "createdAt", "updatedAt"})


class FirestoreSectionRepository(FirestoreCrudRepository[SectionResult]):
    """Sections ordered by order (then createdAt). type is required and must be a known kind."""

    collection_name = COLLECTION_SECTIONS
    sort_descending = False

    def _sort_key(self, result: SectionResult) -> Any:
        return (result.order, result.created_at)

    def _to_result(self, doc_id: str, data: dict[str, Any]) -> SectionResult:
        raw_type = self._required(doc_id, data, "type")
        try:
            kind = SectionType(raw_type)
        except ValueError:
            self._logger.error("Section %s has unknown type %r", doc_id, raw_type)
            raise DataIntegrityException(self.collection_name, doc_id, "type") from None
        return SectionResult(
            id=doc_id,
            type=kind,
            order=coerce_order(data.get("order")),
            is_active=data.get("isActive") is True,
            created_at=as_datetime(data.get("createdAt")),
            updated_at=as_datetime(data.get("updatedAt")),
            content={k: v for k, v in data.items() if k not in _SHARED_FIELDS},
        )

    @traced("firestore.sections.list_active")
    async def list_active(self) -> list[SectionResult]:
        query = self._coll.where("isActive", "==", True)
        return self._sorted([self._to_result(s.id, s.to_dict()) async for s in query.stream()])
