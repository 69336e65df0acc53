"""Application layer: interfaces, DTOs, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (platform repositories, publishers).
"""

from app.application.interfaces import (
    IApplicationRepository,
    ITaskEventPublisher,
    ITaskRepository,
)
from app.application.use_cases.tasks import TaskCreationService, TodayDashboardService

__all__ = [
    "IApplicationRepository",
    "ITaskEventPublisher",
    "ITaskRepository",
    "TaskCreationService",
    "TodayDashboardService",
]
