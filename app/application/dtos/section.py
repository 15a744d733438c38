"""DTOs for generic page sections (publicContent)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.domain.enums import SectionType


@dataclass(frozen=True)
class SectionResult:
    """Section read-model.

    type is immutable and decides which keys content may hold; order and
    is_active are shared by every kind and kept out of content.
    """

    id: str
    type: SectionType
    order: int
    is_active: bool
    created_at: datetime
    updated_at: datetime
    content: dict[str, Any] = field(default_factory=dict)
