"""Tests for order assignment: the pure policy and both Firestore strategies."""

import pytest

from app.application.services.order_assignment import coerce_order, next_order_from
from app.infrastructure.firebase.collections import COLLECTION_COUNTERS, COLLECTION_INICIATIVAS
from app.infrastructure.firebase.services import (
    CounterOrderAssigner,
    ScanOrderAssigner,
    create_order_assigner,
)
from tests.fakes import FakeFirestoreClient


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, 0),
        (3, 3),
        (2.7, 2),
        ("5", 5),
        (" 4 ", 4),
        ("abc", 0),
        (float("nan"), 0),
        (float("inf"), 0),
        ({"x": 1}, 0),
        (True, 1),
    ],
)
def test_coerce_order(value, expected) -> None:
    assert coerce_order(value) == expected


def test_next_order_on_empty_collection_is_one() -> None:
    assert next_order_from([]) == 1


def test_next_order_is_max_plus_one() -> None:
    assert next_order_from([1, "7", None, "x", 3]) == 8


def test_next_order_ignores_negative_values() -> None:
    assert next_order_from([-5, -1]) == 1


async def test_scan_reads_live_documents() -> None:
    db = FakeFirestoreClient()
    db.seed(COLLECTION_INICIATIVAS, "a", {"ordem": 2})
    db.seed(COLLECTION_INICIATIVAS, "b", {"ordem": "9"})
    db.seed(COLLECTION_INICIATIVAS, "c", {})
    assigner = ScanOrderAssigner(db)
    assert await assigner.next_order(COLLECTION_INICIATIVAS) == 10


async def test_scan_recomputes_after_delete() -> None:
    db = FakeFirestoreClient()
    db.seed(COLLECTION_INICIATIVAS, "a", {"ordem": 1})
    db.seed(COLLECTION_INICIATIVAS, "b", {"ordem": 2})
    assigner = ScanOrderAssigner(db)
    del db.data[COLLECTION_INICIATIVAS]["b"]
    assert await assigner.next_order(COLLECTION_INICIATIVAS) == 2


async def test_counter_seeds_from_scan_then_increments() -> None:
    db = FakeFirestoreClient()
    db.seed(COLLECTION_INICIATIVAS, "a", {"ordem": 4})
    assigner = CounterOrderAssigner(db)
    assert await assigner.next_order(COLLECTION_INICIATIVAS) == 5
    assert await assigner.next_order(COLLECTION_INICIATIVAS) == 6
    assert db.data[COLLECTION_COUNTERS][COLLECTION_INICIATIVAS]["value"] == 6


async def test_counter_on_empty_collection_starts_at_one() -> None:
    assigner = CounterOrderAssigner(FakeFirestoreClient())
    assert await assigner.next_order(COLLECTION_INICIATIVAS) == 1


def test_create_order_assigner_by_name() -> None:
    db = FakeFirestoreClient()
    assert isinstance(create_order_assigner("scan", db), ScanOrderAssigner)
    assert isinstance(create_order_assigner("counter", db), CounterOrderAssigner)
    with pytest.raises(ValueError):
        create_order_assigner("random", db)
