"""Firestore-backed report channel repository (ordered by ordem)."""

from __future__ import annotations

from typing import Any

from app.application.dtos.canal_denuncia import CanalDenunciaResult
from app.application.services.order_assignment import coerce_order
from app.infrastructure.firebase.collections import COLLECTION_CANAIS_DENUNCIA
from app.infrastructure.firebase.repositories._base import (
    OrderedFirestoreRepository,
    as_datetime,
)


class FirestoreCanalDenunciaRepository(OrderedFirestoreRepository[CanalDenunciaResult]):
    collection_name = COLLECTION_CANAIS_DENUNCIA

    def _to_result(self, doc_id: str, data: dict[str, Any]) -> CanalDenunciaResult:
        return CanalDenunciaResult(
            id=doc_id,
            quantificador=str(data.get("quantificador") or ""),
            valor=str(data.get("valor") or ""),
            ordem=coerce_order(data.get("ordem")),
            created_at=as_datetime(data.get("createdAt")),
            updated_at=as_datetime(data.get("updatedAt")),
        )
