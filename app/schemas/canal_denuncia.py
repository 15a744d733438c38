"""Report channel (sectionCanaisDenuncia) API schemas."""

from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel, CamelResponse


class CanalDenunciaCreate(CamelModel):
    """Request body for creating a report channel; ordem is assigned when omitted."""

    quantificador: str = Field(..., min_length=1)
    valor: str = Field(..., min_length=1)
    ordem: int | None = Field(default=None, ge=1)


class CanalDenunciaUpdate(CamelModel):
    quantificador: str | None = Field(default=None, min_length=1)
    valor: str | None = Field(default=None, min_length=1)
    ordem: int | None = Field(default=None, ge=1)


class CanalDenunciaResponse(CamelResponse):
    id: str
    quantificador: str
    valor: str
    ordem: int
    created_at: datetime
    updated_at: datetime
