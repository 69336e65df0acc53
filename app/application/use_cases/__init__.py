"""Application use cases: one entry point per workflow."""

from app.application.use_cases.tasks import (
    TaskCreationService,
    TodayDashboardService,
)

__all__ = [
    "TaskCreationService",
    "TodayDashboardService",
]
