"""Application DTOs (no platform client dependency)."""

from app.application.dtos.application import ApplicationResult
from app.application.dtos.task import CreateTaskCommand, TaskCreatedEvent, TaskResult

__all__ = [
    "ApplicationResult",
    "CreateTaskCommand",
    "TaskCreatedEvent",
    "TaskResult",
]
