"""Health check endpoints. No dependencies; used for liveness and readiness probes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Platform credentials missing", "model": ReadinessErrorResponse}},
)
def readiness_check() -> ReadinessResponse | JSONResponse:
    """Return 200 when the task endpoint can reach the platform; 503 otherwise.

    Only checks that SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY are set; no
    network call is made.
    """
    settings = get_settings()
    if settings.is_service_configured:
        return ReadinessResponse()
    return JSONResponse(
        status_code=503,
        content=ReadinessErrorResponse(
            message="SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is not configured",
        ).model_dump(),
    )
