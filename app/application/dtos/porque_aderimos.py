"""DTOs for "porque aderimos" items."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PorqueAderimosResult:
    id: str
    titulo: str
    conteudo: str
    url: str
    created_at: datetime
    updated_at: datetime
