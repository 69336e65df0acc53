"""Security headers middleware.

Adds security-related response headers. Headers already set by a route win,
which is how HTML pages widen the default Content-Security-Policy for their
inline style and script.
Uses raw ASGI (no BaseHTTPMiddleware).
"""

from typing import Callable

DEFAULT_HEADERS = {
    "Content-Security-Policy": "default-src 'none'",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}

# CSP for server-rendered pages (inline <style>/<script>, same-origin fetch).
PAGE_CONTENT_SECURITY_POLICY = (
    "default-src 'self'; style-src 'self' 'unsafe-inline'; "
    "script-src 'self' 'unsafe-inline'; connect-src 'self'"
)


def SecurityHeadersMiddleware(
    app: Callable, headers: dict[str, str] | None = None
) -> Callable:
    """Set security headers missing from the response. Raw ASGI."""
    resolved = headers if headers is not None else DEFAULT_HEADERS.copy()
    header_list = [(k.encode(), v.encode()) for k, v in resolved.items()]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                seen = {h[0].lower() for h in headers}
                for name_b, value_b in header_list:
                    if name_b.lower() not in seen:
                        headers.append((name_b, value_b))
                        seen.add(name_b.lower())
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
