"""Request context management using contextvars.

Provides async-safe storage for request-scoped data: the request id set by
RequestIDMiddleware and the uid of the verified caller set by the auth
dependencies. Log records pick both up through RequestContextFilter.

Usage:
    set_request_id("5f0c...")
    set_current_user(uid="abc123", is_admin=True)
    ctx = get_request_context()
"""

from contextvars import ContextVar
from dataclasses import dataclass

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_current_uid: ContextVar[str | None] = ContextVar("current_uid", default=None)
_current_is_admin: ContextVar[bool] = ContextVar("current_is_admin", default=False)


@dataclass(frozen=True)
class RequestContext:
    """Immutable snapshot of the current request context."""

    request_id: str | None
    uid: str | None
    is_admin: bool = False


def set_request_id(request_id: str | None) -> None:
    _request_id.set(request_id)


def set_current_user(uid: str, is_admin: bool = False) -> None:
    """Set the verified caller for this request.

    Call from the auth dependency after token verification. Context is
    scoped to the current async task.

    Raises:
        ValueError: If uid is empty.
    """
    if not uid:
        raise ValueError("uid is required")
    _current_uid.set(uid)
    _current_is_admin.set(is_admin)


def clear_current_user() -> None:
    """Clear the current user context."""
    _current_uid.set(None)
    _current_is_admin.set(False)


def get_request_context() -> RequestContext:
    """Return a snapshot of the current request context."""
    return RequestContext(
        request_id=_request_id.get(),
        uid=_current_uid.get(),
        is_admin=_current_is_admin.get(),
    )
