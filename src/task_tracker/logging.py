"""Structured logging configuration for the task tracker.

Uses structlog for structured, context-rich logging that supports
both human-readable console output and machine-readable JSON format.
Log output always goes to stderr; stdout carries command results only.
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from task_tracker.config import BaseSettings


def configure_logging(settings: "BaseSettings | None" = None) -> None:
    """Configure structured logging based on settings.

    Args:
        settings: Application settings. If None, uses defaults.
    """
    log_level = logging.WARNING
    log_format = "console"

    if settings is not None:
        log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)
        log_format = settings.log_format

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Optional logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name) if name else structlog.get_logger()


def bind_context(**kwargs: object) -> None:
    """Bind context variables to all subsequent log calls in the current context.

    Example:
        bind_context(command="add")
        logger.info("task_added")  # Will include command

    Args:
        **kwargs: Key-value pairs to bind to logging context
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


class Loggers:
    """Pre-configured logger instances for task tracker components."""

    @staticmethod
    def cli() -> structlog.stdlib.BoundLogger:
        """Logger for CLI components."""
        return get_logger("task_tracker.cli")

    @staticmethod
    def store() -> structlog.stdlib.BoundLogger:
        """Logger for the task store."""
        return get_logger("task_tracker.store")
