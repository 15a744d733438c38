"""Testimonial API schemas."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from app.schemas.base import CamelModel, CamelResponse, UrlStr


class TestimonialCreate(CamelModel):
    """Request body for creating a testimonial."""

    quote: str = Field(..., min_length=10)
    author: str = Field(..., min_length=3)
    role: str | None = None
    image_url: UrlStr | None = None


class TestimonialUpdate(CamelModel):
    """Request body for updating a testimonial (partial)."""

    clearable_fields: ClassVar[frozenset[str]] = frozenset({"role", "image_url"})

    quote: str | None = Field(default=None, min_length=10)
    author: str | None = Field(default=None, min_length=3)
    role: str | None = None
    image_url: UrlStr | None = None


class TestimonialResponse(CamelResponse):
    id: str
    quote: str
    author: str
    role: str | None = None
    image_url: str | None = None
    created_at: datetime
    updated_at: datetime
