"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import TaskStatus, TaskType
from app.domain.exceptions import (
    ApplicationNotFoundException,
    PlatformNotConfiguredException,
    TaskDeskException,
    TaskPersistenceException,
    TaskUpdateException,
    ValidationException,
)

__all__ = [
    # Enums
    "TaskStatus",
    "TaskType",
    # Exceptions
    "ApplicationNotFoundException",
    "PlatformNotConfiguredException",
    "TaskDeskException",
    "TaskPersistenceException",
    "TaskUpdateException",
    "ValidationException",
]
