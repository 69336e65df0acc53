"""Function-style endpoints (served under /functions/v1)."""

from fastapi import APIRouter

from app.api.functions import create_task

functions_router = APIRouter()
functions_router.include_router(create_task.router, prefix="/create-task", tags=["tasks"])

__all__ = ["functions_router"]
