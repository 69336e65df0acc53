"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.task import TaskCreatedEvent


# Task event publisher interface
class ITaskEventPublisher(Protocol):
    """Protocol for publishing task.created notifications.

    Implementations may raise; callers treat publishing as best-effort.
    """

    async def publish_task_created(self, event: TaskCreatedEvent) -> None:
        """Publish a task.created event on the configured topic."""
