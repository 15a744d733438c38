"""Service account credentials shared by the Firestore, Auth and Storage REST clients.

One google-auth Credentials object with the cloud-platform scope covers all
three APIs. Token refresh is blocking (requests transport), so it runs in a
worker thread.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from google.oauth2.service_account import Credentials

    from app.core.config import Settings

logger = logging.getLogger(__name__)

CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"


def load_service_account_info(settings: "Settings") -> dict[str, Any] | None:
    """Return service account dict from FIREBASE_SERVICE_ACCOUNT_KEY or _PATH.

    Raises:
        ValueError: The key is set but is not valid JSON.
    """
    key_json = (
        settings.firebase_service_account_key.get_secret_value()
        if settings.firebase_service_account_key
        else None
    )
    if key_json:
        try:
            return json.loads(key_json)
        except json.JSONDecodeError as e:
            raise ValueError("FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON") from e
    path = settings.firebase_service_account_path
    if path:
        resolved = Path(path).expanduser().resolve()
        if not resolved.is_file():
            logger.warning(
                "FIREBASE_SERVICE_ACCOUNT_PATH set but file not found: %s (resolved: %s)",
                path,
                resolved,
            )
            return None
        with open(resolved, encoding="utf-8") as f:
            return json.load(f)
    return None


def build_credentials(info: dict[str, Any]) -> "Credentials":
    """Return google.oauth2.service_account.Credentials with the cloud-platform scope."""
    from google.oauth2 import service_account

    return service_account.Credentials.from_service_account_info(
        info, scopes=[CLOUD_PLATFORM_SCOPE]
    )


def _refresh_token(credentials: Any) -> str:
    from google.auth.transport.requests import Request

    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


async def get_access_token(credentials: Any) -> str:
    """Return a valid OAuth access token; refreshes in a thread to avoid blocking."""
    return await asyncio.to_thread(_refresh_token, credentials)
