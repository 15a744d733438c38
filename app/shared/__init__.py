"""Shared utilities: request context, telemetry, and cross-cutting helpers.

Used by application, infrastructure and presentation. No business logic.
"""

from app.shared.context import (
    RequestContext,
    clear_current_user,
    get_request_context,
    set_current_user,
    set_request_id,
)
from app.shared.utils import generate_cuid, utc_now

__all__ = [
    "RequestContext",
    "clear_current_user",
    "get_request_context",
    "set_current_user",
    "set_request_id",
    "generate_cuid",
    "utc_now",
]
