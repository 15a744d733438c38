"""Initiative (sectionIniciativas) API schemas."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from app.schemas.base import CamelModel, CamelResponse, UrlStr


class IniciativaCreate(CamelModel):
    """Request body for creating an initiative.

    ordem is optional; when omitted the next free position is assigned.
    """

    titulo: str = Field(..., min_length=3)
    url: UrlStr | None = None
    ordem: int | None = Field(default=None, ge=1)
    conteudo: str = Field(..., min_length=10)


class IniciativaUpdate(CamelModel):
    clearable_fields: ClassVar[frozenset[str]] = frozenset({"url"})

    titulo: str | None = Field(default=None, min_length=3)
    url: UrlStr | None = None
    ordem: int | None = Field(default=None, ge=1)
    conteudo: str | None = Field(default=None, min_length=10)


class IniciativaResponse(CamelResponse):
    id: str
    titulo: str
    url: str | None = None
    ordem: int
    conteudo: str
    created_at: datetime
    updated_at: datetime
