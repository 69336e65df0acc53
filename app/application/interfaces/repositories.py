"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.application import ApplicationResult
    from app.application.dtos.task import TaskResult


# Application repository interface
class IApplicationRepository(Protocol):
    """Protocol for reading parent application records."""

    async def get_by_id(self, application_id: str) -> ApplicationResult | None:
        """Return application (id, tenant_id) or None if it does not exist."""


# Task repository interface
class ITaskRepository(Protocol):
    """Protocol for task rows (insert, status update, due-window listing)."""

    async def create(
        self,
        application_id: str,
        task_type: str,
        due_at: str,
        tenant_id: str,
        status: str,
    ) -> str:
        """Insert a task and return its generated id."""

    async def list_open_due_between(
        self, start: datetime, end: datetime
    ) -> list[TaskResult]:
        """Return non-completed tasks with start <= due_at < end, ascending by due_at."""

    async def mark_completed(self, task_id: str, completed_at: datetime) -> None:
        """Set status to completed and stamp completed_at."""
