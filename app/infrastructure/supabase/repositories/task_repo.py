"""Platform-backed task repository (implements ITaskRepository)."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from app.application.dtos.task import TaskResult
from app.domain.enums import TaskStatus
from app.infrastructure.supabase._rest_client import SupabaseRESTClient
from app.infrastructure.supabase.tables import TABLE_TASKS, TASK_LIST_COLUMNS
from app.shared.utils.datetime import parse_iso_datetime, to_iso_utc


def _to_result(row: dict[str, Any]) -> TaskResult:
    """Map a tasks row to TaskResult DTO."""
    completed_at = row.get("completed_at")
    return TaskResult(
        id=str(row["id"]),
        type=row.get("type", ""),
        application_id=str(row.get("application_id", "")),
        due_at=parse_iso_datetime(row["due_at"]),
        status=row.get("status", TaskStatus.PENDING.value),
        description=row.get("description"),
        tenant_id=row.get("tenant_id"),
        completed_at=parse_iso_datetime(completed_at) if completed_at else None,
    )


class SupabaseTaskRepository:
    """Task repository using PostgREST. Same contract as ITaskRepository."""

    def __init__(self, client: SupabaseRESTClient) -> None:
        self._client = client

    async def create(
        self,
        application_id: str,
        task_type: str,
        due_at: str,
        tenant_id: str,
        status: str,
    ) -> str:
        """Insert a task and return the platform-generated id."""
        rows = await (
            self._client.table(TABLE_TASKS)
            .insert(
                {
                    "application_id": application_id,
                    "type": task_type,
                    "due_at": due_at,
                    "tenant_id": tenant_id,
                    "status": status,
                }
            )
            .select("id")
            .execute()
        )
        if not rows or not rows[0].get("id"):
            raise ValueError("Insert returned no row id")
        return str(rows[0]["id"])

    async def list_open_due_between(
        self, start: datetime, end: datetime
    ) -> list[TaskResult]:
        """Return non-completed tasks due in [start, end), ascending by due_at."""
        rows = await (
            self._client.table(TABLE_TASKS)
            .select(TASK_LIST_COLUMNS)
            .neq("status", TaskStatus.COMPLETED.value)
            .gte("due_at", to_iso_utc(start))
            .lt("due_at", to_iso_utc(end))
            .order("due_at", ascending=True)
            .execute()
        )
        return [_to_result(row) for row in rows]

    async def mark_completed(self, task_id: str, completed_at: datetime) -> None:
        """Set status completed and completed_at for the task with this id."""
        await (
            self._client.table(TABLE_TASKS)
            .update(
                {
                    "status": TaskStatus.COMPLETED.value,
                    "completed_at": to_iso_utc(completed_at),
                }
            )
            .eq("id", task_id)
            .execute()
        )
