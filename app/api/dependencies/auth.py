"""Auth guard dependencies: Firebase ID token verification and the admin claim.

get_current_user raises 401 when the bearer token is missing or rejected;
require_admin additionally raises 403 unless the admin claim is exactly true.
The verified caller is recorded in the request context for logging.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.api.dependencies.firebase import FirebaseDep
from app.application.dtos.user import AuthenticatedUser
from app.domain.exceptions import AuthenticationException, AuthorizationException
from app.shared.context import set_current_user

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    clients: FirebaseDep,
) -> AuthenticatedUser:
    """Verify the bearer ID token (signature, expiry, audience, issuer, revocation)."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationException("No token")
    claims = await clients.auth.verify_id_token(credentials.credentials)
    user = AuthenticatedUser(uid=claims["uid"], email=claims.get("email"), claims=claims)
    set_current_user(user.uid, is_admin=user.is_admin)
    return user


async def require_admin(
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
) -> AuthenticatedUser:
    if not current_user.is_admin:
        raise AuthorizationException()
    return current_user


CurrentUser = Annotated[AuthenticatedUser, Depends(get_current_user)]
AdminUser = Annotated[AuthenticatedUser, Depends(require_admin)]


async def require_admin_token(
    credentials: HTTPAuthorizationCredentials | None, clients: FirebaseDep
) -> AuthenticatedUser:
    """Run the full guard from inside a route, for routes where only some inputs need admin."""
    return await require_admin(await get_current_user(credentials, clients))


OptionalBearer = Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)]
