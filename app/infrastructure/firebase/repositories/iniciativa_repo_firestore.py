"""Firestore-backed initiative repository (ordered by ordem)."""

from __future__ import annotations

from typing import Any

from app.application.dtos.iniciativa import IniciativaResult
from app.application.services.order_assignment import coerce_order
from app.infrastructure.firebase.collections import COLLECTION_INICIATIVAS
from app.infrastructure.firebase.repositories._base import (
    OrderedFirestoreRepository,
    as_datetime,
    optional_str,
)


class FirestoreIniciativaRepository(OrderedFirestoreRepository[IniciativaResult]):
    """Initiatives. Legacy documents default to titulo '', ordem 0, conteudo ''."""

    collection_name = COLLECTION_INICIATIVAS

    def _to_result(self, doc_id: str, data: dict[str, Any]) -> IniciativaResult:
        return IniciativaResult(
            id=doc_id,
            titulo=data.get("titulo") or "",
            url=optional_str(data.get("url")),
            ordem=coerce_order(data.get("ordem")),
            conteudo=data.get("conteudo") or "",
            created_at=as_datetime(data.get("createdAt")),
            updated_at=as_datetime(data.get("updatedAt")),
        )
