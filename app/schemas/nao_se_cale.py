"""API schemas for "não se cale" items."""

from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel, CamelResponse, UrlStr


class NaoSeCaleCreate(CamelModel):
    url: UrlStr
    conteudo: str = Field(..., min_length=1)


class NaoSeCaleUpdate(CamelModel):
    url: UrlStr | None = None
    conteudo: str | None = Field(default=None, min_length=1)


class NaoSeCaleResponse(CamelResponse):
    id: str
    url: str
    conteudo: str
    created_at: datetime
    updated_at: datetime
