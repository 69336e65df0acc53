"""Domain exceptions for the task desk application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses (see app.api.functions.create_task and
app.core.exception_handlers).
"""

from typing import Any


class TaskDeskException(Exception):
    """Base exception for all task desk application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description (safe to return to callers).
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(TaskDeskException):
    """Raised when input validation fails (e.g. missing field, invalid format)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ApplicationNotFoundException(TaskDeskException):
    """Raised when a task references an application that does not exist.

    Treated as a client input error (400), not a missing resource (404).
    """

    def __init__(self, application_id: str) -> None:
        super().__init__(
            "Application not found",
            "APPLICATION_NOT_FOUND",
            {"application_id": application_id},
        )


class PlatformNotConfiguredException(TaskDeskException):
    """Raised when the platform URL or a required credential is missing."""

    def __init__(self, message: str = "Internal server configuration error") -> None:
        super().__init__(message, "CONFIGURATION_ERROR")


class TaskPersistenceException(TaskDeskException):
    """Raised when the task row could not be inserted."""

    def __init__(self, message: str = "Failed to create task") -> None:
        super().__init__(message, "STORAGE_ERROR")


class TaskUpdateException(TaskDeskException):
    """Raised when a task status update is rejected by the platform."""

    def __init__(self, task_id: str, reason: str) -> None:
        super().__init__(reason, "STORAGE_ERROR", {"task_id": task_id})
