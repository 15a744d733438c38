"""DTOs for reports submitted through the public site."""

from dataclasses import dataclass, field
from datetime import datetime

from app.domain.enums import ReportStatus


@dataclass(frozen=True)
class ReportAttachment:
    """A blob previously uploaded under reports/ and referenced by the report."""

    storage_path: str
    content_type: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class ReportResult:
    """Report read-model. protocol is server generated (YYYYMMDD-XXXXXX)."""

    id: str
    protocol: str
    descricao: str
    contato: str | None
    anonimo: bool
    status: ReportStatus
    channel: str
    created_at: datetime
    updated_at: datetime
    attachments: tuple[ReportAttachment, ...] = field(default_factory=tuple)
