"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here (SRP). See app.core.lifespan and app.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and optionally
clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from app.api.dashboard import router as dashboard_router
from app.api.functions import functions_router
from app.api.v1 import api_router
from app.core.config import get_settings
from app.core.exception_handlers import register_exception_handlers
from app.core.lifespan import create_lifespan
from app.middleware import (
    PAGE_CONTENT_SECURITY_POLICY,
    RequestIDMiddleware,
    RequestSizeLimitMiddleware,
    SecurityHeadersMiddleware,
)
from app.pages import render_root_page
from app.shared.telemetry.logging import setup_logging
from app.shared.telemetry.telemetry import configure_telemetry


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    setup_logging()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)

    if settings.telemetry_enabled:
        configure_telemetry(app, settings)

    # Middleware: last added = outermost. Order: size limit → request ID → security headers.
    # CORS for the task function is answered by its own routes.
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(RequestSizeLimitMiddleware, max_bytes=settings.max_request_body_bytes)

    app.include_router(api_router, prefix="/api/v1")
    app.include_router(functions_router, prefix="/functions/v1")
    app.include_router(dashboard_router)

    @app.get("/", response_class=HTMLResponse)
    def root() -> HTMLResponse:
        """Landing page with links to the dashboard and API documentation."""
        return HTMLResponse(
            content=render_root_page(settings.app_name),
            headers={"Content-Security-Policy": PAGE_CONTENT_SECURITY_POLICY},
        )

    return app


app = create_app()
