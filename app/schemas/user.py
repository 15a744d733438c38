"""User administration API schemas (Firebase Authentication accounts)."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, EmailStr, Field

from app.schemas.base import CamelResponse


class UserCreateRequest(BaseModel):
    """Request body for POST /admin/users. The new account is created as admin."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class UserEmailRequest(BaseModel):
    """Request body for PUT /admin/users/promote and /demote."""

    email: EmailStr


class UserCreatedResponse(BaseModel):
    message: str
    uid: str


class UserResponse(CamelResponse):
    uid: str
    email: str | None = None
    display_name: str | None = None
    disabled: bool = False
    custom_claims: dict[str, Any] = Field(default_factory=dict)
    creation_time: datetime | None = None
    last_sign_in_time: datetime | None = None
    admin: bool = False
