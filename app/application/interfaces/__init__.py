"""Application ports (repository and service protocols)."""

from app.application.interfaces.repositories import (
    IApplicationRepository,
    ITaskRepository,
)
from app.application.interfaces.services import ITaskEventPublisher

__all__ = [
    "IApplicationRepository",
    "ITaskEventPublisher",
    "ITaskRepository",
]
