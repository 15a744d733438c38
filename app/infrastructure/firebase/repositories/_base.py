"""Generic Firestore CRUD repository shared by the content resources.

Subclasses name their collection, map a stored document to a DTO in
_to_result, and choose the list order. Lists are sorted in Python so
documents without the sort field (legacy data) are still returned.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, ClassVar, Generic, TypeVar

from app.domain.exceptions import DataIntegrityException
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase._rest_encoding import SERVER_TIMESTAMP
from app.shared.telemetry.tracing import traced
from app.shared.utils.datetime import ensure_utc, parse_rfc3339, utc_now
from app.shared.utils.generators import generate_cuid

R = TypeVar("R")

CREATED_AT = "createdAt"
UPDATED_AT = "updatedAt"
_RESERVED_FIELDS = frozenset({"id", CREATED_AT, UPDATED_AT})


def as_datetime(value: Any) -> datetime:
    """Stored timestamp as aware UTC datetime; missing or unreadable values become now."""
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, str):
        try:
            return parse_rfc3339(value)
        except ValueError:
            return utc_now()
    return utc_now()


def optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


class FirestoreCrudRepository(ABC, Generic[R]):
    """list / get_by_id / create / update / delete over one collection.

    Absence is reported with None (get, update) or False (delete).
    """

    collection_name: ClassVar[str]
    sort_descending: ClassVar[bool] = True

    def __init__(self, client: FirestoreRESTClient, logger: logging.Logger | None = None) -> None:
        self._client = client
        self._coll = client.collection(self.collection_name)
        self._logger = logger or logging.getLogger(__name__)

    @abstractmethod
    def _to_result(self, doc_id: str, data: dict[str, Any]) -> R:
        """Map a stored document to the resource DTO."""

    def _sort_key(self, result: R) -> Any:
        return result.created_at

    def _required(self, doc_id: str, data: dict[str, Any], field: str) -> Any:
        """Field value or DataIntegrityException when it is missing/empty."""
        value = data.get(field)
        if value is None or value == "":
            self._logger.error(
                "Stored document %s/%s lacks required field %s",
                self.collection_name,
                doc_id,
                field,
            )
            raise DataIntegrityException(self.collection_name, doc_id, field)
        return value

    def _sorted(self, results: list[R]) -> list[R]:
        return sorted(results, key=self._sort_key, reverse=self.sort_descending)

    @traced("firestore.list")
    async def list(self) -> list[R]:
        results = [self._to_result(s.id, s.to_dict()) async for s in self._coll.stream()]
        return self._sorted(results)

    @traced("firestore.get")
    async def get_by_id(self, doc_id: str) -> R | None:
        snapshot = await self._coll.document(doc_id).get()
        if snapshot is None:
            return None
        return self._to_result(snapshot.id, snapshot.to_dict())

    async def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        """Hook for subclasses that derive fields (e.g. ordem) before writing."""
        return data

    @traced("firestore.create")
    async def create(self, data: dict[str, Any]) -> R:
        """Write with a fresh id and server timestamps, then read the document back."""
        fields = {k: v for k, v in (await self._prepare_create(data)).items() if k not in _RESERVED_FIELDS}
        fields[CREATED_AT] = SERVER_TIMESTAMP
        fields[UPDATED_AT] = SERVER_TIMESTAMP
        ref = self._coll.document(generate_cuid())
        await ref.create(fields)
        snapshot = await ref.get()
        if snapshot is None:
            raise DataIntegrityException(self.collection_name, ref.id, "id")
        self._logger.info("Created %s/%s", self.collection_name, ref.id)
        return self._to_result(snapshot.id, snapshot.to_dict())

    @traced("firestore.update")
    async def update(self, doc_id: str, data: dict[str, Any]) -> R | None:
        """Merge the supplied fields and refresh updatedAt. None if the document does not exist."""
        ref = self._coll.document(doc_id)
        if await ref.get() is None:
            return None
        fields = {k: v for k, v in data.items() if k not in _RESERVED_FIELDS}
        fields[UPDATED_AT] = SERVER_TIMESTAMP
        if not await ref.update(fields):
            return None
        snapshot = await ref.get()
        if snapshot is None:
            return None
        return self._to_result(snapshot.id, snapshot.to_dict())

    @traced("firestore.delete")
    async def delete(self, doc_id: str) -> bool:
        """Delete; False if the document did not exist."""
        ref = self._coll.document(doc_id)
        if await ref.get() is None:
            return False
        await ref.delete()
        self._logger.info("Deleted %s/%s", self.collection_name, doc_id)
        return True


class OrderedFirestoreRepository(FirestoreCrudRepository[R]):
    """Repository whose documents carry ordem; a missing ordem is assigned on create."""

    sort_descending: ClassVar[bool] = False
    order_field: ClassVar[str] = "ordem"

    def __init__(
        self,
        client: FirestoreRESTClient,
        order_assigner: Any,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(client, logger)
        self._order_assigner = order_assigner

    def _sort_key(self, result: R) -> Any:
        return (getattr(result, self.order_field), result.created_at)

    async def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        if data.get(self.order_field) is not None:
            return data
        order = await self._order_assigner.next_order(self.collection_name)
        return {**data, self.order_field: order}
