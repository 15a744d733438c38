"""Report (denúncia) API schemas."""

from datetime import datetime

from pydantic import Field, field_validator

from app.domain.enums import ReportStatus
from app.schemas.base import CamelModel, CamelResponse

REPORTS_FOLDER = "reports/"


class ReportAttachmentIn(CamelModel):
    """A blob uploaded through a signed URL of type report."""

    storage_path: str = Field(..., min_length=1)
    content_type: str | None = None
    name: str | None = None

    @field_validator("storage_path")
    @classmethod
    def validate_reports_folder(cls, v: str) -> str:
        if not v.startswith(REPORTS_FOLDER) or ".." in v:
            raise ValueError(f"must reference an upload under {REPORTS_FOLDER}")
        return v


class ReportCreate(CamelModel):
    """Request body for POST /public/reports.

    contato is required when anonimo is false (checked by ReportService so the
    error names the field).
    """

    descricao: str = Field(..., min_length=1)
    contato: str | None = None
    anonimo: bool = True
    channel: str = Field(default="site", min_length=1)
    attachments: list[ReportAttachmentIn] = Field(default_factory=list)


class ReportUpdate(CamelModel):
    """Admin update: triage status and correct the text."""

    status: ReportStatus | None = None
    descricao: str | None = Field(default=None, min_length=1)
    contato: str | None = None


class ReportAttachmentResponse(CamelResponse):
    storage_path: str
    content_type: str | None = None
    name: str | None = None


class ReportResponse(CamelResponse):
    id: str
    protocol: str
    descricao: str
    contato: str | None = None
    anonimo: bool
    status: ReportStatus
    channel: str
    attachments: list[ReportAttachmentResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class ReportSubmittedResponse(CamelResponse):
    """Returned to the public caller: only what they need to follow up."""

    id: str
    protocol: str
    status: ReportStatus
    created_at: datetime
