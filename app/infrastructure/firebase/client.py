"""Firebase clients (REST-based, no firebase-admin).

Built at app startup from either FIREBASE_SERVICE_ACCOUNT_KEY (JSON string)
or FIREBASE_SERVICE_ACCOUNT_PATH (file path). The Firestore, Auth and
Storage clients share one credentials object and one httpx connection
pool. The result is stored on app.state by the lifespan and injected into
repositories and services; nothing here is a module-level singleton.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from app.infrastructure.external.storage import StorageFactory, StorageProtocol
from app.infrastructure.firebase._credentials import (
    build_credentials,
    load_service_account_info,
)
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase.auth_client import FirebaseAuthRESTClient

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


@dataclass
class FirebaseClients:
    """The three external collaborators plus the HTTP pool they share."""

    firestore: FirestoreRESTClient
    auth: FirebaseAuthRESTClient
    storage: StorageProtocol
    http: httpx.AsyncClient

    async def aclose(self) -> None:
        await self.http.aclose()


def init_firebase(settings: "Settings") -> FirebaseClients | None:
    """Create the Firebase clients.

    Returns None when no credentials are configured, so the app can start
    (health checks, docs) without Firebase; routes needing a client then
    answer 503.

    Raises:
        ValueError: Credentials are present but malformed or lack a project id.
    """
    info = load_service_account_info(settings)
    if not info:
        logger.warning("Firebase credentials not configured; data routes will return 503")
        return None
    project_id = settings.firebase_project_id or info.get("project_id")
    if not project_id:
        raise ValueError("Firebase service account JSON missing 'project_id'")

    credentials = build_credentials(info)
    http = httpx.AsyncClient(timeout=settings.outbound_timeout_seconds)
    clients = FirebaseClients(
        firestore=FirestoreRESTClient(project_id, credentials, http_client=http),
        auth=FirebaseAuthRESTClient(project_id, credentials, http_client=http),
        storage=StorageFactory.create_storage_service(
            credentials, settings=settings, http_client=http
        ),
        http=http,
    )
    logger.info(
        "Firebase initialized: project=%s bucket=%s",
        project_id,
        settings.firebase_storage_bucket,
    )
    return clients
