"""Command-line interface for the task tracker."""

from task_tracker.cli.app import TaskCLIApp, main
from task_tracker.cli.commands import Command, CommandRegistry

__all__ = ["Command", "CommandRegistry", "TaskCLIApp", "main"]
