"""Mint a token for manual API testing.

Usage:
    python -m scripts.get_id_token <uid>
Prints a custom token signed with the service account. When
FIREBASE_WEB_API_KEY is set, the custom token is also exchanged for an ID
token, which is what the API expects as "Authorization: Bearer <token>".
"""

import asyncio
import sys

from app.core.config import get_settings
from app.infrastructure.firebase import init_firebase

_SIGN_IN_URL = "https://identitytoolkit.googleapis.com/v1/accounts:signInWithCustomToken"


async def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python -m scripts.get_id_token <uid>", file=sys.stderr)
        sys.exit(1)
    uid = sys.argv[1]

    settings = get_settings()
    clients = init_firebase(settings)
    if clients is None:
        print("Firebase credentials are not configured", file=sys.stderr)
        sys.exit(1)
    try:
        custom_token = clients.auth.create_custom_token(uid)
        print(f"Custom token for uid={uid}:")
        print(custom_token)
        if settings.firebase_web_api_key is None:
            print("FIREBASE_WEB_API_KEY not set; skipping ID token exchange", file=sys.stderr)
            return
        resp = await clients.http.post(
            _SIGN_IN_URL,
            params={"key": settings.firebase_web_api_key.get_secret_value()},
            json={"token": custom_token, "returnSecureToken": True},
        )
        if resp.status_code >= 400:
            print(f"Token exchange failed: HTTP {resp.status_code} {resp.text}", file=sys.stderr)
            sys.exit(1)
        print("ID token:")
        print(resp.json()["idToken"])
    finally:
        await clients.aclose()


if __name__ == "__main__":
    asyncio.run(main())
