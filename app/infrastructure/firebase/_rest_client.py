"""Thin Firestore REST API client (no firebase-admin).

Uses google-auth for service account tokens and Firestore REST v1.
All writes go through :commit so that server timestamps (REQUEST_TIME
transforms), existence preconditions and atomic increments are applied by
Firestore itself. All HTTP calls use httpx.AsyncClient so they do not
block the event loop.
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from typing import Any

import httpx

from app.infrastructure.firebase._credentials import get_access_token
from app.infrastructure.firebase._rest_encoding import (
    _decode_value,
    _encode_value,
    decode_document,
    encode_write,
    field_path,
)

_BASE = "https://firestore.googleapis.com/v1"
_LIST_PAGE_SIZE = 300


class DocumentExistsError(Exception):
    """Raised when a create precondition fails (409: document ID already exists)."""


async def _request_async(
    client: httpx.AsyncClient,
    url: str,
    method: str = "GET",
    body: dict | None = None,
    access_token: str | None = None,
    params: dict[str, Any] | None = None,
) -> Any:
    """Perform async HTTP request to Firestore REST API. 404 returns None."""
    headers = {"Content-Type": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    if method == "GET":
        resp = await client.get(url, headers=headers, params=params)
    elif method == "POST":
        resp = await client.post(url, headers=headers, json=body, params=params)
    elif method == "DELETE":
        resp = await client.delete(url, headers=headers)
    else:
        raise ValueError(f"Unsupported method: {method!r}")
    if resp.status_code == 404:
        return None
    if resp.status_code == 409:
        raise DocumentExistsError("Document already exists")
    if resp.status_code not in (200, 204):
        resp.raise_for_status()
    if method == "DELETE":
        return {}
    raw = resp.content
    return json.loads(raw.decode()) if raw else {}


class DocumentSnapshot:
    """Snapshot of a document (id + data)."""

    def __init__(self, id_: str, data: dict):
        self.id = id_
        self._data = data

    def to_dict(self) -> dict:
        return self._data


def _snapshot(document: dict) -> DocumentSnapshot:
    name = document.get("name", "")
    doc_id = name.split("/")[-1] if name else ""
    return DocumentSnapshot(doc_id, decode_document(document))


class DocumentReference:
    """Reference to a single document; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path

    @property
    def id(self) -> str:
        return self._path.split("/")[-1]

    @property
    def name(self) -> str:
        """Full resource name (projects/.../documents/<collection>/<id>)."""
        return self._path

    async def get(self) -> DocumentSnapshot | None:
        """Fetch the document; returns None if not found."""
        out = await _request_async(
            self._client._http,
            f"{_BASE}/{self._path}",
            access_token=await self._client.get_token(),
        )
        if not out:
            return None
        return _snapshot(out)

    async def create(self, data: dict[str, Any]) -> None:
        """Create the document; raise DocumentExistsError if the id is taken."""
        await self._client.commit([self._write(data, exists=False)])

    async def update(self, data: dict[str, Any]) -> bool:
        """Merge the given top-level fields into an existing document.

        Returns:
            False if the document does not exist (nothing written).
        """
        write = self._write(data, exists=True)
        write["updateMask"] = {
            "fieldPaths": [field_path(k) for k in write["update"]["fields"]]
        }
        return await self._client.commit([write]) is not None

    async def delete(self) -> None:
        """Delete the document. Idempotent if document is already missing."""
        await _request_async(
            self._client._http,
            f"{_BASE}/{self._path}",
            method="DELETE",
            access_token=await self._client.get_token(),
        )

    def _write(self, data: dict[str, Any], exists: bool) -> dict:
        fields, transforms = encode_write(data)
        write: dict[str, Any] = {
            "update": {"name": self._path, "fields": fields},
            "currentDocument": {"exists": exists},
        }
        if transforms:
            write["updateTransforms"] = transforms
        return write


_OP_MAP: dict[str, str] = {
    "==": "EQUAL",
    "!=": "NOT_EQUAL",
    "<": "LESS_THAN",
    "<=": "LESS_THAN_OR_EQUAL",
    ">": "GREATER_THAN",
    ">=": "GREATER_THAN_OR_EQUAL",
    "in": "IN",
    "not-in": "NOT_IN",
    "array-contains": "ARRAY_CONTAINS",
}


class _Query:
    """Fluent query builder for collection; runs via runQuery (filter/order/limit on server)."""

    def __init__(
        self,
        client: "FirestoreRESTClient",
        parent: str,
        collection_id: str,
    ):
        self._client = client
        self._parent = parent
        self._collection_id = collection_id
        self._filters: list[dict] = []
        self._orders: list[dict] = []
        self._limit: int | None = None

    def where(self, field: str, op: str, value: Any) -> "_Query":
        self._filters.append(
            {
                "fieldFilter": {
                    "field": {"fieldPath": field_path(field)},
                    "op": _OP_MAP.get(op, op),
                    "value": _encode_value(value),
                }
            }
        )
        return self

    def order_by(self, field: str, direction: str = "ASCENDING") -> "_Query":
        self._orders.append(
            {"field": {"fieldPath": field_path(field)}, "direction": direction}
        )
        return self

    def limit(self, n: int) -> "_Query":
        self._limit = n
        return self

    def to_structured_query(self) -> dict[str, Any]:
        structured: dict[str, Any] = {"from": [{"collectionId": self._collection_id}]}
        if len(self._filters) == 1:
            structured["where"] = self._filters[0]
        elif self._filters:
            structured["where"] = {
                "compositeFilter": {"op": "AND", "filters": self._filters}
            }
        if self._orders:
            structured["orderBy"] = self._orders
        if self._limit:
            structured["limit"] = self._limit
        return structured

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """Execute the query and yield document snapshots."""
        resp = await _request_async(
            self._client._http,
            f"{_BASE}/{self._parent}:runQuery",
            method="POST",
            body={"structuredQuery": self.to_structured_query()},
            access_token=await self._client.get_token(),
        )
        items = resp if isinstance(resp, list) else ([resp] if resp else [])
        for item in items:
            if "document" in item:
                yield _snapshot(item["document"])


class CollectionReference:
    """Reference to a collection; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path.rstrip("/")

    @property
    def id(self) -> str:
        return self._path.split("/")[-1]

    def document(self, document_id: str) -> DocumentReference:
        return DocumentReference(self._client, f"{self._path}/{document_id}")

    def _query(self) -> _Query:
        return _Query(self._client, self._path.rsplit("/", 1)[0], self.id)

    def where(self, field: str, op: str, value: Any) -> _Query:
        """Start a query with a filter. Chain .where()/.order_by()/.limit(), then .stream()."""
        return self._query().where(field, op, value)

    def order_by(self, field: str, direction: str = "ASCENDING") -> _Query:
        return self._query().order_by(field, direction)

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """List every document in the collection, following nextPageToken."""
        page_token: str | None = None
        while True:
            params: dict[str, Any] = {"pageSize": _LIST_PAGE_SIZE}
            if page_token:
                params["pageToken"] = page_token
            out = await _request_async(
                self._client._http,
                f"{_BASE}/{self._path}",
                params=params,
                access_token=await self._client.get_token(),
            )
            if not out:
                return
            for doc in out.get("documents", []):
                yield _snapshot(doc)
            page_token = out.get("nextPageToken")
            if not page_token:
                return


class FirestoreRESTClient:
    """Lightweight Firestore client using REST API (no firebase-admin)."""

    def __init__(
        self,
        project_id: str,
        credentials: Any,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._project_id = project_id
        self._credentials = credentials
        self._database = f"projects/{project_id}/databases/(default)"
        self._prefix = f"{self._database}/documents"
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=30.0)
        self._owns_http = http_client is None

    @property
    def project_id(self) -> str:
        return self._project_id

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def get_token(self) -> str:
        return await get_access_token(self._credentials)

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self, f"{self._prefix}/{collection_id}")

    async def commit(self, writes: list[dict]) -> dict | None:
        """Apply writes atomically. Returns None when a precondition target is missing (404)."""
        return await _request_async(
            self._http,
            f"{_BASE}/{self._database}/documents:commit",
            method="POST",
            body={"writes": writes},
            access_token=await self.get_token(),
        )

    async def increment(self, collection_id: str, document_id: str, field: str, amount: int = 1) -> int:
        """Atomically add amount to an integer field (creating the document if needed); return the new value."""
        name = f"{self._prefix}/{collection_id}/{document_id}"
        out = await self.commit(
            [
                {
                    "update": {"name": name, "fields": {}},
                    "updateMask": {"fieldPaths": []},
                    "updateTransforms": [
                        {
                            "fieldPath": field_path(field),
                            "increment": {"integerValue": str(amount)},
                        }
                    ],
                }
            ]
        )
        results = ((out or {}).get("writeResults") or [{}])[0].get("transformResults") or []
        if not results:
            raise RuntimeError(f"Increment on {collection_id}/{document_id} returned no result")
        return int(_decode_value(results[0]))


__all__ = [
    "CollectionReference",
    "DocumentExistsError",
    "DocumentReference",
    "DocumentSnapshot",
    "FirestoreRESTClient",
]
