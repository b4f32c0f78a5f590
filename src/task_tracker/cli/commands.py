"""Command registry and base command class.

Each CLI verb is a Command subclass. The app looks the verb up in a
CommandRegistry and hands the remaining arguments to execute().

Example of creating a custom command:

    from task_tracker.cli.commands import Command

    class CountCommand(Command):
        '''Print how many tasks exist.'''

        def __init__(self):
            super().__init__(
                name="count",
                description="Count tasks",
                usage="count",
            )

        def execute(self, args: list[str], app: Any) -> None:
            app.console.print(str(len(app.store.load())))
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from task_tracker.cli.app import TaskCLIApp


class Command(ABC):
    """Base class for CLI commands.

    Subclass this to create custom commands. Override execute() to
    implement command behavior. Failures are reported by raising a
    TaskTrackerError; the app turns it into a message and exit status.
    """

    def __init__(
        self,
        name: str,
        description: str,
        aliases: list[str] | None = None,
        usage: str | None = None,
        examples: list[str] | None = None,
    ) -> None:
        """Initialize the command.

        Args:
            name: Command name as typed on the command line
            description: Short description of what the command does
            aliases: Alternative names for the command
            usage: Usage string showing syntax (e.g., "delete <id>")
            examples: List of example usages
        """
        self.name = name
        self.description = description
        self.aliases = aliases or []
        self.usage = usage or name
        self.examples = examples or []

    @abstractmethod
    def execute(self, args: list[str], app: "TaskCLIApp") -> None:
        """Execute the command with given arguments.

        Args:
            args: Arguments following the command name
            app: The CLI application instance
        """


class CommandRegistry:
    """Registry for CLI commands.

    Handles command registration and lookup by name or alias.
    """

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(self, command: Command) -> None:
        """Register a command and its aliases."""
        self._commands[command.name] = command
        for alias in command.aliases:
            self._commands[alias] = command

    def get(self, name: str) -> Command | None:
        """Get a command by name or alias."""
        return self._commands.get(name)

    def all_commands(self) -> list[Command]:
        """Get all unique commands (excluding aliases), in registration order."""
        seen: set[str] = set()
        commands: list[Command] = []
        for cmd in self._commands.values():
            if cmd.name not in seen:
                seen.add(cmd.name)
                commands.append(cmd)
        return commands
