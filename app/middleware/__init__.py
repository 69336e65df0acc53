"""HTTP middleware: request size limit, request ID, security headers.

Applied in main app; order matters (first added = outermost).
Import and use from app.main.
"""

from app.middleware.request_id import RequestIDMiddleware
from app.middleware.request_size_limit import RequestSizeLimitMiddleware
from app.middleware.security_headers import (
    PAGE_CONTENT_SECURITY_POLICY,
    SecurityHeadersMiddleware,
)

__all__ = [
    "PAGE_CONTENT_SECURITY_POLICY",
    "RequestIDMiddleware",
    "RequestSizeLimitMiddleware",
    "SecurityHeadersMiddleware",
]
