"""Firestore-backed order assignment strategies.

scan: read every document of the collection and take max(ordem) + 1. Two
concurrent creates can receive the same value.

counter: keep the last issued order in _counters/<collection> and advance
it with an atomic server-side increment. The counter is seeded from a scan
the first time a collection is used.
"""

from __future__ import annotations

import logging

from app.application.services.order_assignment import ORDER_FIELD, next_order_from
from app.core.config import ORDER_ASSIGNMENT_STRATEGIES
from app.infrastructure.firebase._rest_client import DocumentExistsError, FirestoreRESTClient
from app.infrastructure.firebase.collections import COLLECTION_COUNTERS
from app.shared.telemetry.tracing import add_span_attributes, traced

_COUNTER_FIELD = "value"


class ScanOrderAssigner:
    """next_order by full collection scan (missing or non-numeric ordem counts as 0)."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client

    async def _orders(self, collection: str) -> list:
        return [
            snapshot.to_dict().get(ORDER_FIELD)
            async for snapshot in self._client.collection(collection).stream()
        ]

    async def current_max(self, collection: str) -> int:
        return next_order_from(await self._orders(collection)) - 1

    @traced("order.next_order.scan")
    async def next_order(self, collection: str) -> int:
        values = await self._orders(collection)
        add_span_attributes(**{"firestore.collection": collection, "order.scanned": len(values)})
        return next_order_from(values)


class CounterOrderAssigner:
    """next_order via an atomic increment on a per-collection counter document."""

    def __init__(self, client: FirestoreRESTClient, logger: logging.Logger | None = None) -> None:
        self._client = client
        self._scan = ScanOrderAssigner(client)
        self._logger = logger or logging.getLogger(__name__)

    async def _ensure_seeded(self, collection: str) -> None:
        counter = self._client.collection(COLLECTION_COUNTERS).document(collection)
        if await counter.get() is not None:
            return
        seed = await self._scan.current_max(collection)
        try:
            await counter.create({_COUNTER_FIELD: seed})
            self._logger.info("Seeded order counter for %s at %d", collection, seed)
        except DocumentExistsError:
            self._logger.debug("Order counter for %s seeded concurrently", collection)

    @traced("order.next_order.counter")
    async def next_order(self, collection: str) -> int:
        await self._ensure_seeded(collection)
        add_span_attributes(**{"firestore.collection": collection})
        return await self._client.increment(COLLECTION_COUNTERS, collection, _COUNTER_FIELD)


def create_order_assigner(
    strategy: str, client: FirestoreRESTClient
) -> ScanOrderAssigner | CounterOrderAssigner:
    """Build the assigner named by ORDER_ASSIGNMENT_STRATEGY.

    Raises:
        ValueError: Unknown strategy.
    """
    if strategy == "scan":
        return ScanOrderAssigner(client)
    if strategy == "counter":
        return CounterOrderAssigner(client)
    raise ValueError(
        f"Unknown order assignment strategy {strategy!r}; expected one of {ORDER_ASSIGNMENT_STRATEGIES}"
    )
