"""Request body size limit middleware.

JSON bodies are capped at max_bytes; requests under upload_prefix get the
larger upload_max_bytes (file ceiling plus multipart overhead). Enforces the
limit for both Content-Length and Transfer-Encoding: chunked.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming and background tasks.
"""

import json
from typing import Any, Callable


def _get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def _content_length(scope: dict) -> int | None:
    """Declared Content-Length, or None when absent or not a number."""
    raw = _get_header(scope, "content-length")
    if raw is None or not raw.strip().isdigit():
        return None
    return int(raw.strip())


async def _send_413(send: Callable, max_bytes: int, actual: int | None = None) -> None:
    """Send 413 Payload Too Large response."""
    details: dict[str, Any] = {"max_bytes": max_bytes}
    if actual is not None:
        details["content_length"] = actual
    body = json.dumps(
        {
            "error": "PAYLOAD_TOO_LARGE",
            "message": f"Request body must be at most {max_bytes} bytes",
            "details": details,
        }
    ).encode()
    await send({
        "type": "http.response.start",
        "status": 413,
        "headers": [(b"content-type", b"application/json")],
    })
    await send({
        "type": "http.response.body",
        "body": body,
        "more_body": False,
    })


def RequestSizeLimitMiddleware(
    app: Callable,
    max_bytes: int,
    upload_max_bytes: int | None = None,
    upload_prefix: str = "/api/uploads",
) -> Callable:
    """Reject requests whose body exceeds the limit for their path. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        limit = max_bytes
        if upload_max_bytes is not None and scope.get("path", "").startswith(upload_prefix):
            limit = upload_max_bytes

        length = _content_length(scope)
        if length is not None:
            if length > limit:
                await _send_413(send, limit, length)
                return
            await app(scope, receive, send)
            return

        # No usable Content-Length (chunked or missing): count while buffering.
        chunks: list[bytes] = []
        total = 0
        while True:
            message = await receive()
            if message["type"] != "http.request":
                await app(scope, receive, send)
                return
            body = message.get("body", b"")
            total += len(body)
            if total > limit:
                await _send_413(send, limit, total)
                return
            chunks.append(body)
            if not message.get("more_body", False):
                break

        class ReplayReceive:
            """Replay collected body chunks to the app one message at a time."""

            def __init__(self) -> None:
                self._index = 0

            async def __call__(self) -> dict:
                if self._index < len(chunks):
                    i = self._index
                    self._index += 1
                    return {
                        "type": "http.request",
                        "body": chunks[i],
                        "more_body": self._index < len(chunks),
                    }
                return await receive()

        await app(scope, ReplayReceive(), send)

    return asgi_app
