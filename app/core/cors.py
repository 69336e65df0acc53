"""CORS headers for the browser-callable function endpoints.

Only paths under FUNCTIONS_PATH_PREFIX carry them; there is no app-wide CORS
middleware. Route handlers, the HTTP exception handler and the body size
limit all use the same headers so every response on those paths is readable
from a browser.
"""

from app.core.config import get_settings

FUNCTIONS_PATH_PREFIX = "/functions/"


def is_function_path(path: str) -> bool:
    return path.startswith(FUNCTIONS_PATH_PREFIX)


def cors_headers() -> dict[str, str]:
    """CORS headers for the function (any origin, platform client headers)."""
    settings = get_settings()
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Headers": settings.cors_allow_headers,
    }
