"""Shared utilities: datetime and generators."""

from app.shared.utils.datetime import (
    ensure_utc,
    epoch_ms,
    format_rfc3339,
    from_epoch_ms,
    parse_rfc3339,
    utc_now,
)
from app.shared.utils.generators import generate_cuid, generate_protocol

__all__ = [
    "generate_cuid",
    "generate_protocol",
    "utc_now",
    "ensure_utc",
    "epoch_ms",
    "format_rfc3339",
    "from_epoch_ms",
    "parse_rfc3339",
]
