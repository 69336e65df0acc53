"""DTOs for tasks (no dependency on the platform client)."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime

from app.domain.enums import TaskType


@dataclass(frozen=True)
class CreateTaskCommand:
    """Validated input for the task creation handler.

    due_at_raw is the caller's original string; it is stored and broadcast
    unchanged. due_at is its parsed UTC value.
    """

    application_id: str
    task_type: TaskType
    due_at: datetime
    due_at_raw: str


@dataclass(frozen=True)
class TaskResult:
    """Task row as read from the tasks table."""

    id: str
    type: str
    application_id: str
    due_at: datetime
    status: str
    description: str | None = None
    tenant_id: str | None = None
    completed_at: datetime | None = None


@dataclass(frozen=True)
class TaskCreatedEvent:
    """Payload of the task.created notification."""

    task_id: str
    application_id: str
    task_type: str
    due_at: str
    created_at: str

    def to_dict(self) -> dict[str, str]:
        """Serialize for JSON publish."""
        return asdict(self)
