"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to the service's JSON error shape {"success": false, "error": ...}.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.core.cors import cors_headers, is_function_path
from app.domain.exceptions import TaskDeskException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status. Unknown parent application is a
# client input error (400), not 404.
ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "APPLICATION_NOT_FOUND": 400,
    "CONFIGURATION_ERROR": 500,
    "STORAGE_ERROR": 500,
}


def status_for(exc: TaskDeskException) -> int:
    """Return the HTTP status for a domain exception (400 when unmapped)."""
    return ERROR_CODE_STATUS.get(exc.error_code, 400)


def error_body(message: str) -> dict[str, object]:
    """Return the JSON body for a failed request."""
    return {"success": False, "error": message}


def _task_desk_exception_handler(
    request: Request, exc: TaskDeskException
) -> JSONResponse:
    """Return {success: false, error: message} with the mapped status code."""
    status = status_for(exc)
    if status >= 500:
        logger.error("%s on %s: %s %s", exc.error_code, request.url.path, exc.message, exc.details)
    return JSONResponse(status_code=status, content=error_body(exc.message))


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 for malformed path/query parameters."""
    logger.info("Request validation failed on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content=error_body("Request validation failed"))


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail).

    On function paths the response carries the CORS headers, and an
    unsupported method is reported as "Method not allowed".
    """
    headers = dict(getattr(exc, "headers", None) or {})
    message = str(exc.detail)
    if is_function_path(request.url.path):
        headers.update(cors_headers())
        if exc.status_code == 405:
            message = "Method not allowed"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message),
        headers=headers or None,
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(status_code=500, content=error_body(detail))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: TaskDeskException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(TaskDeskException, _task_desk_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
