"""Span helpers for repository, storage and identity-provider calls.

traced wraps a coroutine function in a span. When the first argument has a
collection_name (the Firestore repositories), the span carries it as
firestore.collection. Domain errors that map to 4xx responses (not found,
validation, conflict) are recorded as span attributes, not as span errors.
"""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from app.domain.exceptions import (
    ContentApiException,
    DataIntegrityException,
    UpstreamException,
)

T = TypeVar("T")

# Only these kwarg names are recorded as span attributes.
_SAFE_SPAN_ATTR_KEYS = frozenset({
    "doc_id", "uid", "collection", "limit", "upload_type", "destination", "storage_path",
})


def _is_failure(exc: BaseException) -> bool:
    if isinstance(exc, (UpstreamException, DataIntegrityException)):
        return True
    return not isinstance(exc, ContentApiException)


def traced(operation_name: str | None = None) -> Callable:
    """Decorator: run the coroutine inside a span named operation_name.

    Args:
        operation_name: Span name (defaults to module.qualname).
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        tracer = trace.get_tracer(__name__)
        span_name = operation_name or f"{func.__module__}.{func.__qualname__}"

        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            with tracer.start_as_current_span(
                span_name, record_exception=False, set_status_on_exception=False
            ) as span:
                collection = getattr(args[0], "collection_name", None) if args else None
                if isinstance(collection, str):
                    span.set_attribute("firestore.collection", collection)
                for key, value in kwargs.items():
                    if key in _SAFE_SPAN_ATTR_KEYS:
                        span.set_attribute(f"arg.{key}", str(value))
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    if isinstance(e, ContentApiException):
                        span.set_attribute("error.code", e.error_code)
                    if _is_failure(e):
                        span.set_status(Status(StatusCode.ERROR, str(e)))
                        span.record_exception(e)
                    raise
                return result

        return wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Add attributes to the current span (no-op outside a recording span)."""
    span = trace.get_current_span()
    if span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)
