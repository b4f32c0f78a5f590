"""File-based task store.

All tasks live in one JSON array. Every operation reads the whole file,
and every mutation writes the whole file back with an atomic rename.
The store holds no state between calls besides its configuration.
"""

import json
import re
from pathlib import Path
from typing import TYPE_CHECKING

from task_tracker.errors import LoadError, NotFoundError, SaveError, ValidationError
from task_tracker.logging import Loggers
from task_tracker.persistence._utils import atomic_write_json
from task_tracker.tasks.models import Task, TaskStatus, utc_now

if TYPE_CHECKING:
    from task_tracker.config import BaseSettings

logger = Loggers.store()

# Plain ASCII digits only; int() alone would accept "1_0" and non-ASCII digits.
_TASK_ID_RE = re.compile(r"[+-]?[0-9]+")


def parse_task_id(raw: "int | str | None") -> int:
    """Parse a task id given on the command line.

    Raises:
        ValidationError: If the value is missing or not an integer.
    """
    if isinstance(raw, bool):
        raise ValidationError("Invalid task ID.", details={"task_id": raw})
    if isinstance(raw, int):
        return raw
    text = "" if raw is None else str(raw).strip()
    if not _TASK_ID_RE.fullmatch(text):
        raise ValidationError("Invalid task ID.", details={"task_id": raw})
    return int(text)


def _require_description(description: str | None, message: str) -> str:
    if description is None or not description.strip():
        raise ValidationError(message)
    return description


class TaskStore:
    """Persistent task store backed by a single JSON file.

    Example:
        >>> store = TaskStore(Path("tasks.json"))
        >>> task = store.add("Buy milk")
        >>> store.set_status(task.id, TaskStatus.DONE)
        >>> [t.description for t in store.list_tasks("done")]
        ['Buy milk']
    """

    def __init__(
        self,
        path: Path,
        *,
        refuse_corrupt: bool = True,
        indent: int = 2,
    ) -> None:
        """Initialize the store.

        Args:
            path: The tasks file. It need not exist yet.
            refuse_corrupt: If True, mutations fail with LoadError when the
                file cannot be parsed. If False, they proceed from an empty
                list and overwrite the file.
            indent: JSON indentation for written files.
        """
        self._path = Path(path)
        self._refuse_corrupt = refuse_corrupt
        self._indent = indent

    @classmethod
    def from_settings(cls, settings: "BaseSettings") -> "TaskStore":
        """Create a store from settings."""
        return cls(
            settings.tasks_path,
            refuse_corrupt=settings.refuse_corrupt,
            indent=settings.json_indent,
        )

    @property
    def path(self) -> Path:
        return self._path

    # ---- persistence ----

    def _read(self) -> list[Task]:
        """Read and validate the tasks file.

        Raises:
            LoadError: If the file exists but is not a valid task list.
        """
        if not self._path.exists():
            return []
        try:
            text = self._path.read_text(encoding="utf-8")
            if not text.strip():
                return []
            data = json.loads(text)
            if not isinstance(data, list):
                raise TypeError(f"expected a JSON array, got {type(data).__name__}")
            tasks = [Task.from_dict(item) for item in data]
        except (
            OSError, UnicodeDecodeError, ValueError, KeyError, TypeError, RecursionError
        ) as e:
            raise LoadError(
                f"Could not read tasks file: {e}",
                details={"path": str(self._path)},
            ) from e

        seen: set[int] = set()
        for task in tasks:
            if task.id in seen:
                raise LoadError(
                    f"Could not read tasks file: duplicate task id {task.id}",
                    details={"path": str(self._path)},
                )
            seen.add(task.id)

        logger.debug("tasks_loaded", path=str(self._path), count=len(tasks))
        return tasks

    def load(self) -> list[Task]:
        """Load all tasks in stored order.

        A missing file yields an empty list. An unreadable or corrupt file
        is logged as a LoadError and also yields an empty list.
        """
        try:
            return self._read()
        except LoadError as e:
            logger.error("tasks_load_failed", path=str(self._path), error=e.message)
            return []

    def _load_for_update(self) -> list[Task]:
        """Load tasks ahead of a mutation, applying the corrupt-file policy."""
        if self._refuse_corrupt:
            try:
                return self._read()
            except LoadError as e:
                raise LoadError(
                    f"{e.message} (refusing to modify; fix or remove {self._path})",
                    details=e.details,
                ) from e
        return self.load()

    def save(self, tasks: list[Task]) -> None:
        """Replace the file contents with the given tasks.

        Raises:
            SaveError: If the file cannot be written.
        """
        try:
            atomic_write_json(
                self._path, [task.to_dict() for task in tasks], indent=self._indent
            )
        except OSError as e:
            raise SaveError(
                f"Could not save tasks file: {e}",
                details={"path": str(self._path)},
            ) from e
        logger.debug("tasks_saved", path=str(self._path), count=len(tasks))

    @staticmethod
    def next_id(tasks: list[Task]) -> int:
        """Return the id for a new task: one past the highest existing id."""
        if not tasks:
            return 1
        return max(task.id for task in tasks) + 1

    @staticmethod
    def _find(tasks: list[Task], task_id: int) -> Task:
        for task in tasks:
            if task.id == task_id:
                return task
        raise NotFoundError(task_id)

    # ---- operations ----

    def add(self, description: str | None) -> Task:
        """Create a new todo task.

        Args:
            description: Task description. Must be non-empty.

        Returns:
            The created task.
        """
        description = _require_description(description, "Task description is required.")

        tasks = self._load_for_update()
        now = utc_now()
        task = Task(
            id=self.next_id(tasks),
            description=description,
            status=TaskStatus.TODO,
            created_at=now,
            updated_at=now,
        )
        tasks.append(task)
        self.save(tasks)
        logger.info("task_added", task_id=task.id)
        return task

    def update(self, task_id: int | str, description: str | None) -> Task:
        """Replace a task's description.

        Returns:
            The updated task.
        """
        task_id = parse_task_id(task_id)
        description = _require_description(description, "New description is required.")

        tasks = self._load_for_update()
        task = self._find(tasks, task_id)
        task.description = description
        task.touch()
        self.save(tasks)
        logger.info("task_updated", task_id=task_id)
        return task

    def delete(self, task_id: int | str) -> Task:
        """Remove a task.

        Returns:
            The removed task.
        """
        task_id = parse_task_id(task_id)

        tasks = self._load_for_update()
        task = self._find(tasks, task_id)
        self.save([t for t in tasks if t.id != task_id])
        logger.info("task_deleted", task_id=task_id)
        return task

    def set_status(self, task_id: int | str, status: TaskStatus | str) -> Task:
        """Move a task to a new status.

        Returns:
            The updated task.
        """
        task_id = parse_task_id(task_id)
        try:
            status = TaskStatus.parse(status)
        except ValueError:
            raise ValidationError(
                f"Invalid status. Use: {', '.join(TaskStatus.values())}",
                details={"status": status},
            ) from None

        tasks = self._load_for_update()
        task = self._find(tasks, task_id)
        task.status = status
        task.touch()
        self.save(tasks)
        logger.info("task_status_changed", task_id=task_id, status=status.value)
        return task

    def list_tasks(self, status: TaskStatus | str | None = None) -> list[Task]:
        """List tasks in stored order, optionally filtered by status.

        Raises:
            ValidationError: If status is given but not a known status.
        """
        wanted: TaskStatus | None = None
        if status is not None:
            try:
                wanted = TaskStatus.parse(status)
            except ValueError:
                raise ValidationError(
                    f"Invalid status filter. Use: {', '.join(TaskStatus.values())}",
                    details={"status": status},
                ) from None

        tasks = self.load()
        if wanted is None:
            return tasks
        return [t for t in tasks if t.status == wanted]

    def get(self, task_id: int | str) -> Task | None:
        """Get a task by ID."""
        task_id = parse_task_id(task_id)
        for task in self.load():
            if task.id == task_id:
                return task
        return None
