"""Firestore-backed "não se cale" repository."""

from __future__ import annotations

from typing import Any

from app.application.dtos.nao_se_cale import NaoSeCaleResult
from app.infrastructure.firebase.collections import COLLECTION_NAO_SE_CALE
from app.infrastructure.firebase.repositories._base import (
    FirestoreCrudRepository,
    as_datetime,
)


class FirestoreNaoSeCaleRepository(FirestoreCrudRepository[NaoSeCaleResult]):
    """url and conteudo are required on every stored item."""

    collection_name = COLLECTION_NAO_SE_CALE

    def _to_result(self, doc_id: str, data: dict[str, Any]) -> NaoSeCaleResult:
        return NaoSeCaleResult(
            id=doc_id,
            url=self._required(doc_id, data, "url"),
            conteudo=self._required(doc_id, data, "conteudo"),
            created_at=as_datetime(data.get("createdAt")),
            updated_at=as_datetime(data.get("updatedAt")),
        )
