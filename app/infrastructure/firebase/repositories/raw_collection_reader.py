"""Pass-through reads of public collections this API does not manage."""

from __future__ import annotations

from typing import Any

from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.shared.telemetry.tracing import traced


class FirestoreRawCollectionReader:
    """Documents returned as stored, with their id added."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client

    @traced("firestore.raw.list")
    async def list(self, collection: str) -> list[dict[str, Any]]:
        return [
            {**snapshot.to_dict(), "id": snapshot.id}
            async for snapshot in self._client.collection(collection).stream()
        ]

    @traced("firestore.raw.get")
    async def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        snapshot = await self._client.collection(collection).document(doc_id).get()
        if snapshot is None:
            return None
        return {**snapshot.to_dict(), "id": snapshot.id}
