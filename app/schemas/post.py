"""Highlighted post API schemas."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from app.schemas.base import CamelModel, CamelResponse, UrlStr


class PostCreate(CamelModel):
    title: str = Field(..., min_length=3)
    content: str = Field(..., min_length=10)
    image_url: UrlStr | None = None
    author: str | None = None
    post_url: UrlStr | None = None


class PostUpdate(CamelModel):
    clearable_fields: ClassVar[frozenset[str]] = frozenset({"image_url", "author", "post_url"})

    title: str | None = Field(default=None, min_length=3)
    content: str | None = Field(default=None, min_length=10)
    image_url: UrlStr | None = None
    author: str | None = None
    post_url: UrlStr | None = None


class PostResponse(CamelResponse):
    id: str
    title: str
    content: str
    author: str | None = None
    image_url: str | None = None
    post_url: str | None = None
    created_at: datetime
    updated_at: datetime
