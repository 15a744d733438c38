"""Order assignment policy for ordered collections (initiatives, report channels).

Pure functions only; the Firestore-backed strategies live in
app.infrastructure.firebase.services.order_assignment.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

ORDER_FIELD = "ordem"


def coerce_order(value: Any) -> int:
    """Read a stored order value as an int.

    Missing, non-numeric and non-finite values count as 0; numeric strings
    count; fractional values are floored.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0
    if not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return math.floor(value)


def next_order_from(values: Iterable[Any]) -> int:
    """Return max(order) + 1, or 1 when there are no (positive) orders."""
    highest = 0
    for value in values:
        highest = max(highest, coerce_order(value))
    return highest + 1
