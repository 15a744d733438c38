"""DTOs for user administration (identity-provider records, no password)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class UserResult:
    """User read-model built from an Identity Toolkit account record."""

    uid: str
    email: str | None
    display_name: str | None
    disabled: bool
    custom_claims: dict[str, Any] = field(default_factory=dict)
    creation_time: datetime | None = None
    last_sign_in_time: datetime | None = None
    tokens_valid_after: datetime | None = None

    @property
    def admin(self) -> bool:
        return self.custom_claims.get("admin") is True


@dataclass(frozen=True)
class CreatedUserResult:
    """Result of creating an admin user."""

    uid: str
    message: str


@dataclass(frozen=True)
class AuthenticatedUser:
    """Caller identity decoded from a verified ID token."""

    uid: str
    email: str | None = None
    claims: dict[str, Any] = field(default_factory=dict)

    @property
    def is_admin(self) -> bool:
        return self.claims.get("admin") is True
