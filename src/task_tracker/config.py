"""Configuration for the task tracker.

Settings Management:
    The module provides both global singleton and context-based settings:

    1. Global singleton (simple cases):
        set_settings(my_settings)
        settings = get_settings()

    2. Context-based (isolated contexts, tests):
        with SettingsContext(my_settings):
            settings = get_settings()  # Returns my_settings

Settings Loading Priority (highest to lowest):
    1. Constructor arguments
    2. Environment variables (TASK_CLI_* prefix)
    3. Project config (./.task_tracker/settings.json)
    4. User config (~/.task_tracker/settings.json)
    5. .env file
    6. Default values
"""

from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Generator, Tuple, Type

from pydantic_settings import (
    BaseSettings as PydanticBaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from task_tracker.settings_mixins import CLISettingsMixin, StorageSettingsMixin

__all__ = [
    "BaseSettings",
    "SettingsContext",
    "get_settings",
    "set_settings",
    "reload_settings",
]


def _get_json_config_source(
    settings_cls: Type[PydanticBaseSettings],
    json_file: Path,
) -> PydanticBaseSettingsSource | None:
    """Create a JSON config source if the file exists."""
    if not json_file.exists():
        return None
    return JsonConfigSettingsSource(settings_cls, json_file=json_file)


class BaseSettings(StorageSettingsMixin, CLISettingsMixin, PydanticBaseSettings):
    """Settings for the task tracker.

    Mixins provide organized settings:
    - StorageSettingsMixin: tasks file location and corrupt-file policy
    - CLISettingsMixin: logging settings
    """

    model_config = SettingsConfigDict(
        env_prefix="TASK_CLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[PydanticBaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources for layered JSON configuration.

        JSON sources are only included if the files exist.
        """
        sources: list[PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
        ]

        app_name = cls.model_fields["app_name"].default

        project_json = _get_json_config_source(
            settings_cls,
            Path.cwd() / f".{app_name}" / "settings.json",
        )
        if project_json:
            sources.append(project_json)

        user_json = _get_json_config_source(
            settings_cls,
            Path.home() / f".{app_name}" / "settings.json",
        )
        if user_json:
            sources.append(user_json)

        sources.append(dotenv_settings)

        return tuple(sources)


# Context variable for settings (takes precedence over global singleton)
_settings_context: ContextVar[BaseSettings | None] = ContextVar(
    "settings_context", default=None
)

_settings_instance: BaseSettings | None = None


def get_settings() -> BaseSettings:
    """Get the current settings instance.

    Settings resolution order:
    1. Context variable (set via SettingsContext)
    2. Global singleton (set via set_settings)
    3. Fresh BaseSettings instance (created on first access)
    """
    context_settings = _settings_context.get()
    if context_settings is not None:
        return context_settings

    global _settings_instance
    if _settings_instance is None:
        _settings_instance = BaseSettings()
    return _settings_instance


def set_settings(settings: BaseSettings) -> None:
    """Set the global settings instance."""
    global _settings_instance
    _settings_instance = settings


@contextmanager
def SettingsContext(settings: BaseSettings) -> Generator[BaseSettings, None, None]:
    """Context manager for isolated settings.

    Example:
        with SettingsContext(test_settings) as s:
            app = TaskCLIApp.from_settings()  # uses test_settings

    Args:
        settings: Settings to use within the context

    Yields:
        The settings instance
    """
    token = _settings_context.set(settings)
    try:
        yield settings
    finally:
        _settings_context.reset(token)


def reload_settings() -> BaseSettings:
    """Reload settings (clears global singleton and context cache).

    Returns:
        Fresh BaseSettings instance
    """
    global _settings_instance
    _settings_instance = None
    _settings_context.set(None)
    return get_settings()
