"""API schemas for "porque aderimos" items.

url is free text here (any non-empty string), unlike the other resources.
"""

from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel, CamelResponse


class PorqueAderimosCreate(CamelModel):
    titulo: str = Field(..., min_length=1)
    conteudo: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)


class PorqueAderimosUpdate(CamelModel):
    titulo: str | None = Field(default=None, min_length=1)
    conteudo: str | None = Field(default=None, min_length=1)
    url: str | None = Field(default=None, min_length=1)


class PorqueAderimosResponse(CamelResponse):
    id: str
    titulo: str
    conteudo: str
    url: str
    created_at: datetime
    updated_at: datetime
