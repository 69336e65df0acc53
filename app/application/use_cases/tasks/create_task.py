"""Task creation use case: validate input, check parent application, insert, notify."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Callable

from app.application.dtos.task import CreateTaskCommand, TaskCreatedEvent
from app.application.interfaces.repositories import (
    IApplicationRepository,
    ITaskRepository,
)
from app.application.interfaces.services import ITaskEventPublisher
from app.domain.enums import TaskStatus, TaskType
from app.domain.exceptions import (
    ApplicationNotFoundException,
    PlatformNotConfiguredException,
    TaskPersistenceException,
    ValidationException,
)
from app.shared.telemetry.logging import get_logger
from app.shared.telemetry.tracing import TracedOperation, add_span_attributes
from app.shared.utils.datetime import parse_iso_datetime, to_iso_utc, utc_now

logger = get_logger(__name__)

REQUIRED_FIELDS = ("application_id", "task_type", "due_at")

UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def validate_create_task_payload(payload: Any, now: datetime) -> CreateTaskCommand:
    """Run the creation checks in order and stop at the first failure.

    Order: presence, task_type enumeration, due_at parseability, due_at in the
    future (strictly after now), application_id UUID format.

    Args:
        payload: Decoded JSON body; anything but an object counts as no fields.
        now: Validation instant (UTC-aware).

    Returns:
        CreateTaskCommand with the parsed due_at and the caller's raw string.

    Raises:
        ValidationException: On the first rule violated.
    """
    data = payload if isinstance(payload, dict) else {}
    application_id = data.get("application_id")
    task_type = data.get("task_type")
    due_at = data.get("due_at")

    if not application_id or not task_type or not due_at:
        raise ValidationException(
            f"Missing required fields: {', '.join(REQUIRED_FIELDS)}"
        )

    if not isinstance(task_type, str) or task_type not in TaskType.values():
        raise ValidationException(
            f"Invalid task_type. Must be one of: {', '.join(TaskType.values())}",
            field="task_type",
        )

    try:
        if not isinstance(due_at, str):
            raise ValueError("due_at must be a string")
        due_at_dt = parse_iso_datetime(due_at)
    except ValueError:
        raise ValidationException(
            "Invalid due_at timestamp format", field="due_at"
        ) from None

    if due_at_dt <= now:
        raise ValidationException("due_at must be a future timestamp", field="due_at")

    if not isinstance(application_id, str) or not UUID_PATTERN.fullmatch(application_id):
        raise ValidationException(
            "Invalid application_id format (must be UUID)", field="application_id"
        )

    return CreateTaskCommand(
        application_id=application_id,
        task_type=TaskType(task_type),
        due_at=due_at_dt,
        due_at_raw=due_at,
    )


class TaskCreationService:
    """Creates tasks for existing applications and announces them.

    Repositories are None when the platform is not configured; that is
    reported only after input validation passes.
    """

    def __init__(
        self,
        application_repo: IApplicationRepository | None,
        task_repo: ITaskRepository | None,
        publisher: ITaskEventPublisher | None = None,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.application_repo = application_repo
        self.task_repo = task_repo
        self.publisher = publisher
        self._clock = clock

    async def create_task(self, payload: Any) -> str:
        """Validate payload, insert the task under the application's tenant, return its id.

        Raises:
            ValidationException: Invalid input (400).
            PlatformNotConfiguredException: Missing URL or service key (500).
            ApplicationNotFoundException: Unknown application or failed lookup (400).
            TaskPersistenceException: Insert failed (500).
        """
        command = validate_create_task_payload(payload, self._clock())

        if self.application_repo is None or self.task_repo is None:
            logger.error("Missing SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY")
            raise PlatformNotConfiguredException()

        with TracedOperation(
            "tasks.lookup_application", {"application_id": command.application_id}
        ):
            try:
                application = await self.application_repo.get_by_id(command.application_id)
            except Exception:
                logger.exception("Application lookup failed: %s", command.application_id)
                application = None
        if application is None:
            logger.warning("Application not found: %s", command.application_id)
            raise ApplicationNotFoundException(command.application_id)

        with TracedOperation("tasks.insert", {"tenant_id": application.tenant_id}):
            try:
                task_id = await self.task_repo.create(
                    application_id=command.application_id,
                    task_type=command.task_type.value,
                    due_at=command.due_at_raw,
                    tenant_id=application.tenant_id,
                    status=TaskStatus.PENDING.value,
                )
            except Exception as e:
                logger.exception("Error inserting task for application %s", command.application_id)
                raise TaskPersistenceException() from e
        add_span_attributes(task_id=task_id)
        logger.info(
            "Created task %s (%s) for application %s",
            task_id,
            command.task_type.value,
            command.application_id,
        )

        await self._publish_created(task_id, command)
        return task_id

    async def _publish_created(self, task_id: str, command: CreateTaskCommand) -> None:
        """Best-effort task.created notification; failures are logged and dropped."""
        if self.publisher is None:
            return
        event = TaskCreatedEvent(
            task_id=task_id,
            application_id=command.application_id,
            task_type=command.task_type.value,
            due_at=command.due_at_raw,
            created_at=to_iso_utc(self._clock()),
        )
        with TracedOperation("tasks.publish_created", {"task_id": task_id}):
            try:
                await self.publisher.publish_task_created(event)
            except Exception:
                logger.exception("Task notification failed for %s", task_id)
