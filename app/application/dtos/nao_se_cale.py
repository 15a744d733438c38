"""DTOs for "não se cale" items."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NaoSeCaleResult:
    id: str
    url: str
    conteudo: str
    created_at: datetime
    updated_at: datetime
