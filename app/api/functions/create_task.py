"""Task creation function endpoint: POST /functions/v1/create-task.

Public, browser-callable endpoint. Every response carries permissive CORS
headers; OPTIONS preflight gets them with an empty body. Other methods are
answered 405 by the HTTP exception handler, with the same headers. Errors use
{"success": false, "error": ...}; 500 responses never echo internal detail.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from app.api.v1.dependencies import get_task_creation_service
from app.application.use_cases.tasks import TaskCreationService
from app.core.cors import cors_headers
from app.core.exception_handlers import error_body, status_for
from app.domain.exceptions import TaskDeskException

logger = logging.getLogger(__name__)

router = APIRouter()


def _json(status_code: int, content: dict) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content, headers=cors_headers())


@router.options("", include_in_schema=False)
async def create_task_preflight() -> Response:
    """Answer CORS preflight immediately."""
    return Response(status_code=200, headers=cors_headers())


@router.post("")
async def create_task(
    request: Request,
    service: Annotated[TaskCreationService, Depends(get_task_creation_service)],
) -> JSONResponse:
    """Create a pending task for an existing application.

    Body: {"application_id": uuid, "task_type": "call"|"email"|"review",
    "due_at": ISO-8601 timestamp in the future}.

    Returns 200 {"success": true, "task_id"}; 400 on invalid input or unknown
    application; 500 on configuration, storage or unexpected errors.
    """
    try:
        payload = await request.json()
        task_id = await service.create_task(payload)
    except TaskDeskException as e:
        status = status_for(e)
        if status < 500:
            logger.info("Rejected create-task request: %s", e.message)
        return _json(status, error_body(e.message))
    except Exception:
        logger.exception("Unexpected error in create-task")
        return _json(500, error_body("Internal server error"))
    return _json(200, {"success": True, "task_id": task_id})

