"""DTOs for banners (image blob in Cloud Storage + Firestore record)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class BannerResult:
    """Banner read-model. storage_path always references a blob in the bucket."""

    id: str
    storage_path: str
    url: str
    alt: str
    link: str
    content_type: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime
