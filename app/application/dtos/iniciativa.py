"""DTOs for initiatives (sectionIniciativas)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class IniciativaResult:
    """Initiative read-model. Legacy documents may lack fields; the mapper fills defaults."""

    id: str
    titulo: str
    url: str | None
    ordem: int
    conteudo: str
    created_at: datetime
    updated_at: datetime
