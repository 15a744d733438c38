"""Service interfaces (ports) for the application layer.

Protocols define contracts for external collaborators (DIP): order
assignment, the identity provider and blob storage.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.user import UserResult


# Order assignment for ordered collections
class IOrderAssigner(Protocol):
    """Protocol for computing the next ordem of a collection."""

    async def next_order(self, collection: str) -> int:
        """Return max(order) + 1 over the collection, or 1 when it is empty."""


# Identity provider (Firebase Authentication)
class IIdentityProvider(Protocol):
    """Protocol for user administration and token verification."""

    async def verify_id_token(self, token: str, check_revoked: bool = True) -> dict[str, Any]:
        """Return decoded claims (with "uid"); raise AuthenticationException when invalid."""

    async def create_user(self, email: str, password: str) -> str:
        """Create an email/password account and return its uid."""

    async def get_user(self, uid: str) -> UserResult | None:
        """Return the user or None."""

    async def get_user_by_email(self, email: str) -> UserResult | None:
        """Return the user or None."""

    async def list_users(self) -> list[UserResult]:
        """Return every user."""

    async def set_custom_claims(self, uid: str, claims: dict[str, Any]) -> None:
        """Replace the user's custom claims."""

    async def delete_user(self, uid: str) -> None:
        """Delete the user."""
