"""Task model and its JSON representation."""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class TaskStatus(str, Enum):
    """Valid task statuses."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def values(cls) -> list[str]:
        """Status values in lifecycle order."""
        return [s.value for s in cls]

    @classmethod
    def parse(cls, value: "str | TaskStatus") -> "TaskStatus":
        """Convert a raw value to a TaskStatus.

        Raises:
            ValueError: If the value is not a known status.
        """
        if isinstance(value, cls):
            return value
        return cls(value)


def utc_now() -> str:
    """Current time as an ISO-8601 UTC string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def parse_timestamp(value: str) -> datetime:
    """Parse a stored timestamp into an aware datetime."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


@dataclass
class Task:
    """A single tracked task."""

    id: int
    description: str
    status: TaskStatus = TaskStatus.TODO
    created_at: str = ""
    updated_at: str = ""

    def touch(self) -> None:
        """Refresh the modification timestamp."""
        self.updated_at = utc_now()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        """Build a Task from its stored form.

        Unlike a lenient loader this rejects anything that would break the
        store's invariants instead of patching it with defaults.

        Raises:
            KeyError: A required field is missing.
            TypeError: A field has the wrong type.
            ValueError: A field has an invalid value.
        """
        task_id = data["id"]
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise TypeError(f"task id must be an integer, got {task_id!r}")
        if task_id <= 0:
            raise ValueError(f"task id must be positive, got {task_id}")

        description = data["description"]
        if not isinstance(description, str) or not description:
            raise ValueError(f"task {task_id} has an empty description")

        created_at = data["createdAt"]
        updated_at = data["updatedAt"]
        for name, value in (("createdAt", created_at), ("updatedAt", updated_at)):
            if not isinstance(value, str) or not value:
                raise ValueError(f"task {task_id} has no {name}")
            parse_timestamp(value)

        return cls(
            id=task_id,
            description=description,
            status=TaskStatus(data["status"]),
            created_at=created_at,
            updated_at=updated_at,
        )
