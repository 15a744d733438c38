"""User administration service over the identity provider.

Identity Toolkit error codes that are the caller's fault are translated into
domain exceptions; anything else propagates as an upstream error (500).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.user import CreatedUserResult, UserResult
from app.domain.exceptions import (
    ConflictException,
    ResourceNotFoundException,
    UpstreamException,
    ValidationException,
)

if TYPE_CHECKING:
    from app.application.interfaces.services import IIdentityProvider

ADMIN_CLAIM = "admin"

_CONFLICT_CODES = frozenset({"EMAIL_EXISTS", "DUPLICATE_EMAIL"})
_NOT_FOUND_CODES = frozenset({"USER_NOT_FOUND", "EMAIL_NOT_FOUND"})
_INVALID_INPUT_CODES = {
    "WEAK_PASSWORD": "password",
    "INVALID_PASSWORD": "password",
    "MISSING_PASSWORD": "password",
    "INVALID_EMAIL": "email",
    "MISSING_EMAIL": "email",
}


def _translate(exc: UpstreamException, subject: str) -> Exception | None:
    """Domain exception for a whitelisted provider code, else None."""
    code = exc.details.get("provider_code")
    if code in _CONFLICT_CODES:
        return ConflictException("O endereço de e-mail já está em uso.", field="email")
    if code in _NOT_FOUND_CODES:
        return ResourceNotFoundException("user", subject)
    if code in _INVALID_INPUT_CODES:
        field = _INVALID_INPUT_CODES[code]
        return ValidationException(f"Invalid {field} ({code})", field=field)
    return None


class UserAdminService:
    """List, create (as admin), promote, demote and delete users."""

    def __init__(
        self,
        identity: "IIdentityProvider",
        logger: logging.Logger | None = None,
    ) -> None:
        self._identity = identity
        self._logger = logger or logging.getLogger(__name__)

    async def list_users(self) -> list[UserResult]:
        return await self._identity.list_users()

    async def get_user(self, uid: str) -> UserResult:
        """Raises ResourceNotFoundException if no such user."""
        user = await self._identity.get_user(uid)
        if user is None:
            raise ResourceNotFoundException("user", uid)
        return user

    async def create_admin(self, email: str, password: str) -> CreatedUserResult:
        """Create the account and grant the admin claim.

        Raises:
            ConflictException: email already registered.
            ValidationException: weak password or invalid email.
        """
        try:
            uid = await self._identity.create_user(email, password)
            await self._identity.set_custom_claims(uid, {ADMIN_CLAIM: True})
        except UpstreamException as exc:
            translated = _translate(exc, email)
            if translated is None:
                raise
            raise translated from exc
        self._logger.info("Admin user created: uid=%s", uid)
        return CreatedUserResult(
            uid=uid,
            message=f"Usuário administrador criado com sucesso: {email}",
        )

    async def _user_by_email(self, email: str) -> UserResult:
        try:
            user = await self._identity.get_user_by_email(email)
        except UpstreamException as exc:
            translated = _translate(exc, email)
            if translated is None:
                raise
            raise translated from exc
        if user is None:
            raise ResourceNotFoundException(
                "user", email, message=f"Usuário com e-mail {email} não encontrado."
            )
        return user

    async def promote(self, email: str) -> str:
        """Set admin: true on the user's claims (other claims kept). Returns the message."""
        user = await self._user_by_email(email)
        await self._identity.set_custom_claims(user.uid, {**user.custom_claims, ADMIN_CLAIM: True})
        self._logger.info("User promoted to admin: uid=%s", user.uid)
        return f"Sucesso! {email} agora é um administrador."

    async def demote(self, email: str) -> str:
        """Remove the admin claim. Returns the message."""
        user = await self._user_by_email(email)
        claims = {k: v for k, v in user.custom_claims.items() if k != ADMIN_CLAIM}
        await self._identity.set_custom_claims(user.uid, claims)
        self._logger.info("Admin claim removed: uid=%s", user.uid)
        return f"{email} não é mais um administrador."

    async def delete_user(self, uid: str) -> None:
        """Raises ResourceNotFoundException if no such user."""
        try:
            await self._identity.delete_user(uid)
        except UpstreamException as exc:
            translated = _translate(exc, uid)
            if translated is None:
                raise
            raise translated from exc
        self._logger.info("User deleted: uid=%s", uid)
