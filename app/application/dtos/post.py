"""DTOs for highlighted posts."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PostResult:
    id: str
    title: str
    content: str
    author: str | None
    image_url: str | None
    post_url: str | None
    created_at: datetime
    updated_at: datetime
