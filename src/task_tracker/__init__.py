"""Task Tracker - a command-line tracker for short textual tasks.

Tasks are kept in a single JSON file (``tasks.json`` in the working
directory by default). Each invocation of ``task-cli`` loads the file,
runs one command, and writes the file back if the command changed it.

- TaskStore: load, save and mutate the task list
- TaskCLIApp: dispatches one command line to the store
- BaseSettings: layered configuration (env, JSON config files, .env)
"""

from task_tracker.cli.app import TaskCLIApp
from task_tracker.config import (
    BaseSettings,
    SettingsContext,
    get_settings,
    reload_settings,
    set_settings,
)
from task_tracker.errors import (
    LoadError,
    NotFoundError,
    SaveError,
    TaskTrackerError,
    ValidationError,
)
from task_tracker.tasks import Task, TaskStatus, TaskStore

__all__ = [
    # CLI
    "TaskCLIApp",
    # Tasks
    "Task",
    "TaskStatus",
    "TaskStore",
    # Errors
    "TaskTrackerError",
    "ValidationError",
    "NotFoundError",
    "LoadError",
    "SaveError",
    # Settings
    "BaseSettings",
    "SettingsContext",
    "get_settings",
    "set_settings",
    "reload_settings",
]

__version__ = "0.1.0"
