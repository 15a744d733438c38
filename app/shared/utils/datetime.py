"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system are timezone-aware UTC. Firestore
returns RFC 3339 strings with up to nanosecond precision and the identity
provider returns epoch milliseconds/seconds as strings; both are normalised
here.
"""

import re
from datetime import UTC, datetime

_FRACTION = re.compile(r"\.(\d+)")


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Use this instead of datetime.now() or datetime.utcnow().
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def parse_rfc3339(value: str) -> datetime:
    """
    Parse a Firestore timestampValue (e.g. 2024-05-01T12:00:00.123456789Z).

    Fractional seconds beyond microseconds are truncated.
    """
    text = value.replace("Z", "+00:00")
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    return ensure_utc(datetime.fromisoformat(text))


def format_rfc3339(dt: datetime) -> str:
    """Format a datetime as a Firestore timestampValue (UTC, microseconds, Z suffix)."""
    return ensure_utc(dt).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def from_epoch_ms(value: int | str | None) -> datetime | None:
    """
    Create a UTC-aware datetime from epoch milliseconds (int or numeric string).

    Returns None for missing or non-numeric input.
    """
    if value is None or value == "":
        return None
    try:
        return datetime.fromtimestamp(int(value) / 1000, tz=UTC)
    except (TypeError, ValueError):
        return None


def epoch_ms(dt: datetime | None = None) -> int:
    """Milliseconds since the epoch for dt (default: now)."""
    return int((dt or utc_now()).timestamp() * 1000)
