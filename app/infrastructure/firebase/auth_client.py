"""Firebase Authentication over REST (Identity Toolkit v1), no firebase-admin.

Account administration (create, lookup, list, custom claims, delete) uses
the service account's OAuth token. ID token verification checks the
signature against Google's securetoken certificates with google-auth, then
the issuer, subject, and (optionally) revocation/disabled state through an
account lookup.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from datetime import datetime
from typing import Any

import httpx
from google.auth import jwt as google_jwt
from google.auth.exceptions import GoogleAuthError, TransportError

from app.application.dtos.user import UserResult
from app.domain.exceptions import UpstreamException
from app.infrastructure.exceptions import IdentityProviderError, InvalidIdTokenError
from app.infrastructure.firebase._credentials import get_access_token
from app.shared.telemetry.tracing import traced
from app.shared.utils.datetime import from_epoch_ms

_IDENTITY_TOOLKIT = "https://identitytoolkit.googleapis.com/v1"
_SECURETOKEN_ISSUER = "https://securetoken.google.com/"
_CUSTOM_TOKEN_AUDIENCE = (
    "https://identitytoolkit.googleapis.com/google.identity.identitytoolkit.v1.IdentityToolkit"
)
_LIST_PAGE_SIZE = 1000


def _provider_code(message: str) -> str:
    """'WEAK_PASSWORD : Password should be ...' -> 'WEAK_PASSWORD'."""
    return message.split(":", 1)[0].strip().split(" ", 1)[0] or "UNKNOWN"


def _to_result(record: dict[str, Any]) -> UserResult:
    raw_claims = record.get("customAttributes")
    claims: dict[str, Any] = {}
    if raw_claims:
        try:
            parsed = json.loads(raw_claims)
        except json.JSONDecodeError:
            parsed = {}
        if isinstance(parsed, dict):
            claims = parsed
    valid_since = record.get("validSince")
    return UserResult(
        uid=record["localId"],
        email=record.get("email"),
        display_name=record.get("displayName"),
        disabled=bool(record.get("disabled", False)),
        custom_claims=claims,
        creation_time=from_epoch_ms(record.get("createdAt")),
        last_sign_in_time=from_epoch_ms(record.get("lastLoginAt")),
        tokens_valid_after=from_epoch_ms(int(valid_since) * 1000) if valid_since else None,
    )


class FirebaseAuthRESTClient:
    """Identity Toolkit admin client plus Firebase ID token verifier."""

    def __init__(
        self,
        project_id: str,
        credentials: Any,
        *,
        http_client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        from google.auth.transport.requests import Request

        self._project_id = project_id
        self._credentials = credentials
        self._base = f"{_IDENTITY_TOOLKIT}/projects/{project_id}"
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=30.0)
        self._owns_http = http_client is None
        self._google_request = Request()
        self._logger = logger or logging.getLogger(__name__)

    @property
    def project_id(self) -> str:
        return self._project_id

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it."""
        if self._owns_http:
            await self._http.aclose()

    async def _call(self, path: str, body: dict | None = None, params: dict | None = None) -> dict:
        headers = {"Authorization": f"Bearer {await get_access_token(self._credentials)}"}
        url = f"{self._base}/{path}"
        if body is None:
            resp = await self._http.get(url, headers=headers, params=params)
        else:
            resp = await self._http.post(url, headers=headers, json=body, params=params)
        if resp.status_code >= 400:
            try:
                message = resp.json().get("error", {}).get("message", "")
            except ValueError:
                message = resp.text
            raise IdentityProviderError(_provider_code(message), message, resp.status_code)
        return resp.json() if resp.content else {}

    @traced("auth.create_user")
    async def create_user(self, email: str, password: str) -> str:
        """Create an email/password account; return its uid."""
        out = await self._call("accounts", {"email": email, "password": password})
        return out["localId"]

    @traced("auth.get_user")
    async def get_user(self, uid: str) -> UserResult | None:
        out = await self._call("accounts:lookup", {"localId": [uid]})
        users = out.get("users") or []
        return _to_result(users[0]) if users else None

    @traced("auth.get_user_by_email")
    async def get_user_by_email(self, email: str) -> UserResult | None:
        out = await self._call("accounts:lookup", {"email": [email]})
        users = out.get("users") or []
        return _to_result(users[0]) if users else None

    @traced("auth.list_users")
    async def list_users(self) -> list[UserResult]:
        """Return every account, following nextPageToken."""
        results: list[UserResult] = []
        page_token: str | None = None
        while True:
            params: dict[str, Any] = {"maxResults": _LIST_PAGE_SIZE}
            if page_token:
                params["nextPageToken"] = page_token
            out = await self._call("accounts:batchGet", params=params)
            users = out.get("users") or []
            results.extend(_to_result(u) for u in users)
            page_token = out.get("nextPageToken")
            if not users or not page_token:
                return results

    @traced("auth.set_custom_claims")
    async def set_custom_claims(self, uid: str, claims: dict[str, Any]) -> None:
        """Replace the account's custom claims (visible in ID tokens after refresh)."""
        await self._call(
            "accounts:update",
            {"localId": uid, "customAttributes": json.dumps(claims)},
        )

    @traced("auth.delete_user")
    async def delete_user(self, uid: str) -> None:
        await self._call("accounts:delete", {"localId": uid})

    def _verify_signature(self, token: str) -> dict[str, Any]:
        from google.oauth2 import id_token

        return id_token.verify_firebase_token(
            token, self._google_request, audience=self._project_id
        )

    @traced("auth.verify_id_token")
    async def verify_id_token(self, token: str, check_revoked: bool = True) -> dict[str, Any]:
        """Verify a Firebase ID token and return its claims with 'uid' added.

        Raises:
            InvalidIdTokenError: Bad signature, expired, wrong audience/issuer,
                revoked, or account disabled.
            UpstreamException: Signing certificates could not be fetched.
        """
        try:
            claims = await asyncio.to_thread(self._verify_signature, token)
        except TransportError as e:
            raise UpstreamException("Could not fetch token signing certificates") from e
        except (ValueError, GoogleAuthError) as e:
            self._logger.info("ID token rejected: %s", e)
            raise InvalidIdTokenError() from e
        if claims.get("iss") != f"{_SECURETOKEN_ISSUER}{self._project_id}":
            raise InvalidIdTokenError("Invalid token issuer")
        sub = claims.get("sub")
        if not isinstance(sub, str) or not sub or len(sub) > 128:
            raise InvalidIdTokenError("Invalid token subject")
        claims = {**claims, "uid": sub}
        if check_revoked:
            await self._check_revoked(claims)
        return claims

    async def _check_revoked(self, claims: dict[str, Any]) -> None:
        user = await self.get_user(claims["uid"])
        if user is None:
            raise InvalidIdTokenError("User not found")
        if user.disabled:
            raise InvalidIdTokenError("User disabled")
        auth_time = claims.get("auth_time") or claims.get("iat")
        if user.tokens_valid_after and auth_time:
            if datetime.fromtimestamp(int(auth_time), tz=user.tokens_valid_after.tzinfo) < user.tokens_valid_after:
                raise InvalidIdTokenError("Token revoked")

    def create_custom_token(self, uid: str, claims: dict[str, Any] | None = None) -> str:
        """Sign a custom token for uid with the service account key (valid one hour)."""
        now = int(time.time())
        payload: dict[str, Any] = {
            "iss": self._credentials.service_account_email,
            "sub": self._credentials.service_account_email,
            "aud": _CUSTOM_TOKEN_AUDIENCE,
            "iat": now,
            "exp": now + 3600,
            "uid": uid,
        }
        if claims:
            payload["claims"] = claims
        token = google_jwt.encode(self._credentials.signer, payload)
        return token.decode("utf-8") if isinstance(token, bytes) else token
