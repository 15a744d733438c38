"""Upload API schemas."""

from pydantic import Field

from app.schemas.base import CamelModel, CamelResponse


class SignedUrlRequest(CamelModel):
    """Request body for POST /uploads/signed-url."""

    type: str = Field(..., min_length=1)
    filename: str = Field(..., min_length=1)
    content_type: str = Field(..., min_length=1)


class UploadResponse(CamelResponse):
    url: str
    storage_path: str


class SignedUploadResponse(CamelResponse):
    upload_url: str
    storage_path: str
