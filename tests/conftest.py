"""Shared test fixtures and utilities for task-tracker tests.

Provides:
- MockContext for isolating tests from global settings and the environment
- Store and CLI app fixtures bound to a temporary tasks file
"""

import io
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Generator

import pytest
import structlog
from rich.console import Console

from task_tracker.cli.app import TaskCLIApp
from task_tracker.config import BaseSettings, reload_settings, set_settings
from task_tracker.logging import configure_logging
from task_tracker.tasks.store import TaskStore


class MockContext:
    """Context manager for isolating tests from global state.

    Handles:
    - Clearing TASK_CLI_* environment variables
    - Resetting the global settings singleton
    - Providing a temporary directory for the tasks file

    Usage:
        with MockContext() as ctx:
            settings = ctx.settings
            tasks_file = ctx.tasks_file
    """

    def __init__(self, **settings_kwargs: Any):
        self._settings_kwargs = settings_kwargs
        self._temp_dir: tempfile.TemporaryDirectory | None = None
        self._settings: BaseSettings | None = None
        self._original_env: dict[str, str] = {}

    def __enter__(self) -> "MockContext":
        self._temp_dir = tempfile.TemporaryDirectory()

        self._original_env = {
            k: v for k, v in os.environ.items() if k.startswith("TASK_CLI_")
        }
        for var in self._original_env:
            del os.environ[var]

        self._settings = BaseSettings(
            tasks_file=self.tasks_file,
            **self._settings_kwargs,
        )
        set_settings(self._settings)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        os.environ.update(self._original_env)
        reload_settings()
        if self._temp_dir:
            self._temp_dir.cleanup()

    @property
    def settings(self) -> BaseSettings:
        if self._settings is None:
            raise RuntimeError("MockContext not entered")
        return self._settings

    @property
    def tasks_file(self) -> Path:
        if self._temp_dir is None:
            raise RuntimeError("MockContext not entered")
        return Path(self._temp_dir.name) / "tasks.json"


class CLIRunner:
    """Runs commands through TaskCLIApp and captures both output streams."""

    def __init__(self, settings: BaseSettings) -> None:
        self.settings = settings
        self.store = TaskStore.from_settings(settings)
        self._out = io.StringIO()
        self._err = io.StringIO()

    def __call__(self, *argv: str) -> int:
        self._out.seek(0)
        self._out.truncate()
        self._err.seek(0)
        self._err.truncate()
        app = TaskCLIApp(
            settings=self.settings,
            store=self.store,
            console=Console(file=self._out, width=200, highlight=False, soft_wrap=True),
            err_console=Console(file=self._err, width=200, highlight=False, soft_wrap=True),
        )
        return app.run(list(argv))

    @property
    def stdout(self) -> str:
        return self._out.getvalue()

    @property
    def stderr(self) -> str:
        return self._err.getvalue()


def write_tasks(path: Path, tasks: list[dict[str, Any]]) -> None:
    """Write a raw task list, bypassing the store."""
    path.write_text(json.dumps(tasks, indent=2), encoding="utf-8")


def make_task(
    task_id: int,
    description: str = "Task",
    status: str = "todo",
    created_at: str = "2024-01-01T12:00:00.000Z",
    updated_at: str | None = None,
) -> dict[str, Any]:
    """Build a raw stored task record."""
    return {
        "id": task_id,
        "description": description,
        "status": status,
        "createdAt": created_at,
        "updatedAt": updated_at or created_at,
    }


@pytest.fixture
def mock_context() -> Generator[MockContext, None, None]:
    """Fixture providing an isolated test context."""
    with MockContext() as ctx:
        yield ctx


@pytest.fixture
def tasks_file(tmp_path: Path) -> Path:
    """Path of a tasks file that does not exist yet."""
    return tmp_path / "tasks.json"


@pytest.fixture
def store(tasks_file: Path) -> TaskStore:
    """Store bound to an empty temporary tasks file."""
    return TaskStore(tasks_file)


@pytest.fixture
def cli(mock_context: MockContext) -> CLIRunner:
    """Runner for CLI commands against an isolated tasks file."""
    return CLIRunner(mock_context.settings)


@pytest.fixture(autouse=True)
def quiet_logging() -> Generator[None, None, None]:
    """Configure logging per test so it never writes to a closed capture stream."""
    configure_logging()
    yield
    structlog.reset_defaults()
