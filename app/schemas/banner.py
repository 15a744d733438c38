"""Banner API schemas."""

from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel, CamelResponse


class BannerConfirm(CamelModel):
    """Request body for POST /admin/banners/confirm.

    storage_path must name a blob already uploaded (signed URL or /uploads/file).
    """

    storage_path: str = Field(..., min_length=1)
    alt: str = ""
    link: str = ""
    is_active: bool = True


class BannerUpdate(CamelModel):
    alt: str | None = None
    link: str | None = None
    is_active: bool | None = None


class BannerResponse(CamelResponse):
    id: str
    storage_path: str
    url: str
    alt: str
    link: str
    content_type: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
