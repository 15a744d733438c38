"""DTOs for report channels (sectionCanaisDenuncia)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CanalDenunciaResult:
    """Report channel read-model: a quantifier/value pair shown in order."""

    id: str
    quantificador: str
    valor: str
    ordem: int
    created_at: datetime
    updated_at: datetime
