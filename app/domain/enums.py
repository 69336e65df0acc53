"""Domain enumerations for the task desk application.

Enums represent fixed sets of domain values (task type and lifecycle status).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings (declaration order)."""
        return [member.value for member in cls]


class TaskType(_ValuesMixin, str, Enum):
    """Kind of follow-up work a task represents."""

    CALL = "call"
    EMAIL = "email"
    REVIEW = "review"


class TaskStatus(_ValuesMixin, str, Enum):
    """Task lifecycle status.

    Tasks are created PENDING; the dashboard moves them to COMPLETED.
    IN_PROGRESS is set by other tools and only displayed here.
    """

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
