"""Pydantic response schemas for the API."""

from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

__all__ = [
    "HealthResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
]
