"""Firestore-backed report repository."""

from __future__ import annotations

from typing import Any

from app.application.dtos.report import ReportAttachment, ReportResult
from app.domain.enums import ReportStatus
from app.infrastructure.firebase.collections import COLLECTION_REPORTS
from app.infrastructure.firebase.repositories._base import (
    FirestoreCrudRepository,
    as_datetime,
    optional_str,
)


def _attachments(value: Any) -> tuple[ReportAttachment, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(
        ReportAttachment(
            storage_path=item["storagePath"],
            content_type=optional_str(item.get("contentType")),
            name=optional_str(item.get("name")),
        )
        for item in value
        if isinstance(item, dict) and isinstance(item.get("storagePath"), str)
    )


def _status(value: Any) -> ReportStatus:
    try:
        return ReportStatus(value)
    except ValueError:
        return ReportStatus.RECEBIDA


class FirestoreReportRepository(FirestoreCrudRepository[ReportResult]):
    """Reports, newest first."""

    collection_name = COLLECTION_REPORTS

    def _to_result(self, doc_id: str, data: dict[str, Any]) -> ReportResult:
        return ReportResult(
            id=doc_id,
            protocol=self._required(doc_id, data, "protocol"),
            descricao=data.get("descricao") or "",
            contato=optional_str(data.get("contato")),
            anonimo=data.get("anonimo") is not False,
            status=_status(data.get("status")),
            channel=data.get("channel") or "site",
            attachments=_attachments(data.get("attachments")),
            created_at=as_datetime(data.get("createdAt")),
            updated_at=as_datetime(data.get("updatedAt")),
        )
