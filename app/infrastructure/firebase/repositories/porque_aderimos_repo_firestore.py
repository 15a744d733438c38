"""Firestore-backed "porque aderimos" repository."""

from __future__ import annotations

from typing import Any

from app.application.dtos.porque_aderimos import PorqueAderimosResult
from app.infrastructure.firebase.collections import COLLECTION_PORQUE_ADERIMOS
from app.infrastructure.firebase.repositories._base import (
    FirestoreCrudRepository,
    as_datetime,
)


class FirestorePorqueAderimosRepository(FirestoreCrudRepository[PorqueAderimosResult]):
    collection_name = COLLECTION_PORQUE_ADERIMOS

    def _to_result(self, doc_id: str, data: dict[str, Any]) -> PorqueAderimosResult:
        return PorqueAderimosResult(
            id=doc_id,
            titulo=data.get("titulo") or "",
            conteudo=data.get("conteudo") or "",
            url=data.get("url") or "",
            created_at=as_datetime(data.get("createdAt")),
            updated_at=as_datetime(data.get("updatedAt")),
        )
