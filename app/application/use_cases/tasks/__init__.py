"""Task use cases: creation handler and today dashboard."""

from app.application.use_cases.tasks.create_task import (
    TaskCreationService,
    validate_create_task_payload,
)
from app.application.use_cases.tasks.today_dashboard import (
    DashboardState,
    TodayDashboardService,
    TodayView,
    local_day_bounds,
)

__all__ = [
    "DashboardState",
    "TaskCreationService",
    "TodayDashboardService",
    "TodayView",
    "local_day_bounds",
    "validate_create_task_payload",
]
