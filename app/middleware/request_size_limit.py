"""Request body size limit middleware.

Rejects bodies larger than MAX_REQUEST_BODY_BYTES with 413 before the task
endpoint decodes them. A declared Content-Length is checked up front; bodies
without one (chunked) are buffered up to the limit and replayed to the app.
The 413 body uses the endpoint error shape ({"success": false, "error": ...})
and, on function paths, carries their CORS headers.
Uses raw ASGI (no BaseHTTPMiddleware).
"""

import json
from typing import Callable

from app.core.cors import cors_headers, is_function_path


def _content_length(scope: dict) -> int | None:
    """Declared Content-Length, or None when absent or not an integer."""
    for key, value in scope.get("headers", []):
        if key.lower() == b"content-length":
            try:
                return int(value)
            except ValueError:
                return None
    return None


async def _reject(scope: dict, send: Callable, max_bytes: int) -> None:
    """Send 413; function paths also get their CORS headers."""
    body = json.dumps(
        {"success": False, "error": f"Request body must be at most {max_bytes} bytes"}
    ).encode()
    headers = [
        (b"content-type", b"application/json"),
        (b"content-length", str(len(body)).encode()),
    ]
    if is_function_path(scope.get("path", "")):
        headers.extend(
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in cors_headers().items()
        )
    await send(
        {
            "type": "http.response.start",
            "status": 413,
            "headers": headers,
        }
    )
    await send({"type": "http.response.body", "body": body})


async def _read_limited(receive: Callable, max_bytes: int) -> list[bytes] | None:
    """Buffer the body; None once it grows past max_bytes. Stops early on disconnect."""
    chunks: list[bytes] = []
    total = 0
    more_body = True
    while more_body:
        message = await receive()
        if message["type"] == "http.disconnect":
            break
        chunk = message.get("body", b"")
        total += len(chunk)
        if total > max_bytes:
            return None
        chunks.append(chunk)
        more_body = message.get("more_body", False)
    return chunks


def _replay(chunks: list[bytes]) -> Callable:
    """Receive callable yielding the buffered chunks, then an empty final message."""
    pending = list(chunks)

    async def receive() -> dict:
        if pending:
            chunk = pending.pop(0)
            return {"type": "http.request", "body": chunk, "more_body": bool(pending)}
        return {"type": "http.request", "body": b"", "more_body": False}

    return receive


def RequestSizeLimitMiddleware(app: Callable, max_bytes: int) -> Callable:
    """Reject requests whose body exceeds max_bytes. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        declared = _content_length(scope)
        if declared is not None:
            if declared > max_bytes:
                await _reject(scope, send, max_bytes)
                return
            await app(scope, receive, send)
            return

        chunks = await _read_limited(receive, max_bytes)
        if chunks is None:
            await _reject(scope, send, max_bytes)
            return
        await app(scope, _replay(chunks), send)

    return asgi_app
