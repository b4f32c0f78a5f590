"""Error taxonomy for the task tracker.

Every failure a command can report is a TaskTrackerError subclass. The CLI
catches these at the command boundary, prints the message as a single line
to stderr and exits with the error's exit code.
"""

from typing import Any


class TaskTrackerError(Exception):
    """Base error for task tracker failures.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        exit_code: Process exit status to use when this error ends a command
        details: Additional error details
    """

    default_code = "TASK_TRACKER_ERROR"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        exit_code: int = 1,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.exit_code = exit_code
        self.details = details or {}


class ValidationError(TaskTrackerError):
    """Bad or missing input, detected before storage is touched."""

    default_code = "VALIDATION_ERROR"


class NotFoundError(TaskTrackerError):
    """The referenced task id does not exist in the store."""

    default_code = "NOT_FOUND"

    def __init__(self, task_id: int):
        super().__init__(
            f"Task with ID {task_id} not found.",
            details={"task_id": task_id},
        )
        self.task_id = task_id


class LoadError(TaskTrackerError):
    """The tasks file exists but cannot be read or parsed."""

    default_code = "LOAD_ERROR"


class SaveError(TaskTrackerError):
    """The tasks file could not be written."""

    default_code = "SAVE_ERROR"
