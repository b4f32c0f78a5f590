"""Settings mixins for storage layout and CLI behaviour.

StorageSettingsMixin: Application identity and where the tasks file lives.
CLISettingsMixin: Logging settings.

These live outside cli/ so that config.py can compose BaseSettings
without importing the cli package.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator


class StorageSettingsMixin:
    """Settings for application identity and the tasks file.

    Should be composed with BaseSettings via multiple inheritance.
    """

    app_name: str = Field(
        default="task_tracker",
        title="App Name",
        description="Application name, used for config directories",
    )

    tasks_file: Path = Field(
        default=Path("tasks.json"),
        title="Tasks File",
        description="JSON file holding all tasks (relative to the working directory)",
    )

    refuse_corrupt: bool = Field(
        default=True,
        title="Refuse Corrupt",
        description=(
            "Refuse to modify tasks when the tasks file cannot be parsed, "
            "instead of starting over from an empty list"
        ),
    )

    json_indent: int = Field(
        default=2,
        ge=0,
        title="JSON Indent",
        description="Indentation used when writing the tasks file",
    )

    @field_validator("tasks_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Expand ~ in paths."""
        return Path(v).expanduser()

    @property
    def tasks_path(self) -> Path:
        """Absolute path of the tasks file."""
        if self.tasks_file.is_absolute():
            return self.tasks_file
        return Path.cwd() / self.tasks_file


class CLISettingsMixin:
    """Settings for CLI configuration.

    Note: This is a mixin, not a BaseSettings subclass, to avoid
    MRO issues when composed with other settings classes.
    """

    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        title="Log Level",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        title="Log Format",
        description="Log output format (console for dev, json for production)",
    )
