"""Today dashboard use case: list open tasks due today, mark tasks complete."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time, timedelta, tzinfo
from enum import Enum
from typing import Callable

from app.application.dtos.task import TaskResult
from app.application.interfaces.repositories import ITaskRepository
from app.domain.exceptions import (
    PlatformNotConfiguredException,
    TaskDeskException,
    TaskUpdateException,
)
from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import utc_now

logger = get_logger(__name__)


def local_day_bounds(now: datetime, tz: tzinfo) -> tuple[datetime, datetime]:
    """Return [start_of_today, start_of_tomorrow) for now's calendar day in tz.

    Built from calendar dates, so a DST change makes the day 23 or 25 hours long.
    """
    today = now.astimezone(tz).date()
    start = datetime.combine(today, time.min, tzinfo=tz)
    end = datetime.combine(today + timedelta(days=1), time.min, tzinfo=tz)
    return start, end


class DashboardState(str, Enum):
    """Mutually exclusive render states of the today view."""

    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    POPULATED = "populated"


@dataclass(frozen=True)
class TodayView:
    """Outcome of one fetch, ready to render."""

    state: DashboardState
    tasks: list[TaskResult] = field(default_factory=list)
    error: str | None = None


class TodayDashboardService:
    """Reads and completes today's tasks with the dashboard's (restricted) credential."""

    def __init__(
        self,
        task_repo: ITaskRepository | None,
        tz: tzinfo,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.task_repo = task_repo
        self.tz = tz
        self._clock = clock

    def _require_repo(self) -> ITaskRepository:
        if self.task_repo is None:
            raise PlatformNotConfiguredException("Dashboard is not configured")
        return self.task_repo

    async def fetch_today(self) -> list[TaskResult]:
        """Return non-completed tasks due in today's local window, ascending by due_at."""
        repo = self._require_repo()
        start, end = local_day_bounds(self._clock(), self.tz)
        return await repo.list_open_due_between(start, end)

    async def load_view(self) -> TodayView:
        """Fetch and classify into error, empty or populated."""
        try:
            tasks = await self.fetch_today()
        except TaskDeskException as e:
            logger.error("Dashboard fetch unavailable: %s", e.message)
            return TodayView(DashboardState.ERROR, error=e.message)
        except Exception as e:
            logger.exception("Failed to fetch today's tasks")
            return TodayView(
                DashboardState.ERROR,
                error=getattr(e, "message", None) or "Failed to fetch tasks",
            )
        if not tasks:
            return TodayView(DashboardState.EMPTY)
        return TodayView(DashboardState.POPULATED, tasks=tasks)

    async def mark_complete(self, task_id: str) -> None:
        """Set the task completed and stamp completed_at with the current time.

        Raises:
            PlatformNotConfiguredException: Missing URL or anon key.
            TaskUpdateException: The platform rejected the update.
        """
        repo = self._require_repo()
        try:
            await repo.mark_completed(task_id, self._clock())
        except Exception as e:
            logger.exception("Failed to mark task %s complete", task_id)
            raise TaskUpdateException(
                task_id, getattr(e, "message", None) or "Failed to update task"
            ) from e
        logger.info("Task %s marked complete", task_id)
