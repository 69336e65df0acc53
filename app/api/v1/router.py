"""API v1 router aggregation.

Operational endpoints only; task creation lives under /functions/v1 and the
dashboard under /dashboard.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
