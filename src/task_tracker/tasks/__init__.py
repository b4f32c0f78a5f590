"""Task model and persistent task store.

Example:
    >>> store = TaskStore(Path("tasks.json"))
    >>> task = store.add("Write report")
    >>> store.set_status(task.id, TaskStatus.IN_PROGRESS)
    >>> store.list_tasks(status="in-progress")
"""

from task_tracker.tasks.models import Task, TaskStatus
from task_tracker.tasks.store import TaskStore, parse_task_id

__all__ = ["Task", "TaskStatus", "TaskStore", "parse_task_id"]
