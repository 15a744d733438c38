"""Aggregate of every public section, as served by GET /api/public."""

from __future__ import annotations

from typing import Any

from app.application.interfaces.repositories import IRawCollectionReader
from app.infrastructure.firebase.collections import (
    COLLECTION_CANAIS_DENUNCIA,
    COLLECTION_CARROSSEL,
    COLLECTION_CURSO,
    COLLECTION_DEPOIMENTOS,
    COLLECTION_DOCUMENTOS,
    COLLECTION_INICIATIVAS,
    COLLECTION_INST_PARCEIRAS,
    COLLECTION_NAO_SE_CALE,
    COLLECTION_POSTS,
    COLLECTION_PORQUE_ADERIMOS,
    COLLECTION_SP_POR_TODAS,
)
from app.shared.telemetry.tracing import traced

# Response key -> collection, in page order.
PUBLIC_SECTIONS: tuple[tuple[str, str], ...] = (
    ("section0Carrossel", COLLECTION_CARROSSEL),
    ("section1NaoSeCale", COLLECTION_NAO_SE_CALE),
    ("section2PorqueAderimos", COLLECTION_PORQUE_ADERIMOS),
    ("section3CanaisDenuncia", COLLECTION_CANAIS_DENUNCIA),
    ("section4Curso", COLLECTION_CURSO),
    ("section5Iniciativas", COLLECTION_INICIATIVAS),
    ("section6InstParceiras", COLLECTION_INST_PARCEIRAS),
    ("section7Depoimentos", COLLECTION_DEPOIMENTOS),
    ("section8PostsDestaque", COLLECTION_POSTS),
    ("section9Documentos", COLLECTION_DOCUMENTOS),
    ("section10SPporTodas", COLLECTION_SP_POR_TODAS),
)


class PublicContentService:
    """Reads the public sections as stored (no reshaping), one collection at a time."""

    def __init__(self, reader: IRawCollectionReader) -> None:
        self._reader = reader

    @traced("public_content.aggregate")
    async def aggregate(self) -> dict[str, list[dict[str, Any]]]:
        content: dict[str, list[dict[str, Any]]] = {}
        for key, collection in PUBLIC_SECTIONS:
            content[key] = await self._reader.list(collection)
        return content
