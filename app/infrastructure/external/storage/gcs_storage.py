"""Google Cloud Storage over the JSON API (httpx + google-auth).

V4 signed upload URLs come from google-cloud-storage, signed locally with the
service account key.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import timedelta
from typing import Any
from urllib.parse import quote

import httpx

from app.infrastructure.exceptions import (
    StorageDeleteError,
    StorageRequestError,
    StorageUploadError,
)
from app.infrastructure.firebase._credentials import get_access_token
from app.shared.telemetry.tracing import traced

_API = "https://storage.googleapis.com/storage/v1"
_UPLOAD_API = "https://storage.googleapis.com/upload/storage/v1"
_PUBLIC_BASE = "https://storage.googleapis.com"


def _object_id(storage_path: str) -> str:
    """Object name as a single URL path segment."""
    return quote(storage_path, safe="")


class GCSStorageService:
    """Cloud Storage bucket access using the service account credentials.

    Uploads are single-shot media uploads; public access is granted with an
    allUsers READER ACL only after the upload request has completed.
    """

    def __init__(
        self,
        bucket: str,
        credentials: Any,
        *,
        http_client: httpx.AsyncClient | None = None,
        signing_bucket: Any = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the bucket client.

        Args:
            bucket: Bucket name (e.g. my-project.appspot.com).
            credentials: google-auth service account credentials (also used for signing).
            http_client: Optional shared client; closed by the owner, not here.
            signing_bucket: google.cloud.storage Bucket used to sign URLs; built
                from credentials on first use when omitted.
            logger: Optional logger; defaults to this module's logger.
        """
        self._bucket = bucket
        self._credentials = credentials
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=60.0)
        self._owns_http = http_client is None
        self._signing_bucket = signing_bucket
        self._logger = logger or logging.getLogger(__name__)

    @property
    def bucket(self) -> str:
        return self._bucket

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def _headers(self, content_type: str | None = None) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {await get_access_token(self._credentials)}"}
        if content_type:
            headers["Content-Type"] = content_type
        return headers

    @traced("storage.upload")
    async def upload(self, storage_path: str, data: bytes, content_type: str) -> dict[str, Any]:
        """Single-request media upload. Raises StorageUploadError on any non-2xx."""
        resp = await self._http.post(
            f"{_UPLOAD_API}/b/{self._bucket}/o",
            params={"uploadType": "media", "name": storage_path},
            headers=await self._headers(content_type or "application/octet-stream"),
            content=data,
        )
        if resp.status_code >= 400:
            raise StorageUploadError(storage_path, f"HTTP {resp.status_code}: {resp.text[:200]}")
        return resp.json()

    @traced("storage.make_public")
    async def make_public(self, storage_path: str) -> None:
        resp = await self._http.post(
            f"{_API}/b/{self._bucket}/o/{_object_id(storage_path)}/acl",
            headers=await self._headers("application/json"),
            json={"entity": "allUsers", "role": "READER"},
        )
        if resp.status_code >= 400:
            raise StorageRequestError(storage_path, "make_public", f"HTTP {resp.status_code}")

    @traced("storage.get_metadata")
    async def get_metadata(self, storage_path: str) -> dict[str, Any] | None:
        resp = await self._http.get(
            f"{_API}/b/{self._bucket}/o/{_object_id(storage_path)}",
            headers=await self._headers(),
        )
        if resp.status_code == 404:
            return None
        if resp.status_code >= 400:
            raise StorageRequestError(storage_path, "get_metadata", f"HTTP {resp.status_code}")
        return resp.json()

    @traced("storage.delete")
    async def delete(self, storage_path: str, ignore_not_found: bool = True) -> bool:
        """Delete the object; a missing object is a no-op when ignore_not_found."""
        resp = await self._http.delete(
            f"{_API}/b/{self._bucket}/o/{_object_id(storage_path)}",
            headers=await self._headers(),
        )
        if resp.status_code == 404:
            if ignore_not_found:
                self._logger.info("Blob already absent: %s", storage_path)
                return False
            raise StorageDeleteError(storage_path, "not found")
        if resp.status_code >= 400:
            raise StorageDeleteError(storage_path, f"HTTP {resp.status_code}")
        return True

    def public_url(self, storage_path: str) -> str:
        return f"{_PUBLIC_BASE}/{self._bucket}/{quote(storage_path, safe='/~')}"

    @traced("storage.generate_upload_url")
    async def generate_upload_url(
        self,
        storage_path: str,
        content_type: str,
        expiration_seconds: int,
    ) -> str:
        """V4 signed PUT URL; the client must send exactly content_type."""

        def _sign() -> str:
            blob = self._get_signing_bucket().blob(storage_path)
            return blob.generate_signed_url(
                version="v4",
                method="PUT",
                expiration=timedelta(seconds=expiration_seconds),
                content_type=content_type,
                credentials=self._credentials,
            )

        return await asyncio.to_thread(_sign)

    def _get_signing_bucket(self) -> Any:
        if self._signing_bucket is None:
            from google.cloud import storage

            client = storage.Client(
                project=getattr(self._credentials, "project_id", None),
                credentials=self._credentials,
            )
            self._signing_bucket = client.bucket(self._bucket)
        return self._signing_bucket
