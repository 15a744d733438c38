"""Grant the admin claim to an existing Firebase Authentication user.

Usage:
    python -m scripts.set_admin <uid>
Other custom claims on the account are kept. Credentials come from the
same settings as the API (.env).
"""

import asyncio
import sys

from app.core.config import get_settings
from app.infrastructure.firebase import init_firebase


async def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python -m scripts.set_admin <uid>", file=sys.stderr)
        sys.exit(1)
    uid = sys.argv[1]

    clients = init_firebase(get_settings())
    if clients is None:
        print("Firebase credentials are not configured", file=sys.stderr)
        sys.exit(1)
    try:
        user = await clients.auth.get_user(uid)
        if user is None:
            print(f"User not found: {uid}", file=sys.stderr)
            sys.exit(1)
        await clients.auth.set_custom_claims(uid, {**user.custom_claims, "admin": True})
        print(f"Admin claim set for uid={uid}")
    finally:
        await clients.aclose()


if __name__ == "__main__":
    asyncio.run(main())
