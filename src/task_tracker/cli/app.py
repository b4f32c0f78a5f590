"""Command-line application for the task tracker.

One invocation runs exactly one command:

    task-cli add "Buy groceries"
    task-cli mark-done 1
    task-cli list done

Results go to stdout; errors and log output go to stderr.
"""

import sys

import pydantic
from rich.console import Console
from rich.text import Text

from task_tracker.cli.commands import Command, CommandRegistry
from task_tracker.cli.task_commands import TASK_COMMANDS
from task_tracker.config import BaseSettings, get_settings
from task_tracker.errors import TaskTrackerError
from task_tracker.logging import Loggers, bind_context, clear_context, configure_logging
from task_tracker.tasks.store import TaskStore

logger = Loggers.cli()

HELP_COMMAND = "help"


class TaskCLIApp:
    """Dispatches a single command against a task store.

    The store is created from settings unless one is passed in, so tests
    and embedding code can point the app at any file.
    """

    def __init__(
        self,
        settings: BaseSettings | None = None,
        store: TaskStore | None = None,
        console: Console | None = None,
        err_console: Console | None = None,
        prog: str = "task-cli",
    ) -> None:
        self.settings = settings or get_settings()
        self.store = store or TaskStore.from_settings(self.settings)
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.err_console = err_console or Console(
            stderr=True, highlight=False, soft_wrap=True
        )
        self.prog = prog
        self.command_registry = CommandRegistry()
        for command_cls in TASK_COMMANDS:
            self.command_registry.register(command_cls())

    def resolve(self, name: str | None) -> Command:
        """Find the command for a name, falling back to help."""
        command = self.command_registry.get(name) if name else None
        if command is None:
            command = self.command_registry.get(HELP_COMMAND)
        if command is None:
            raise LookupError(f"Command not registered: {HELP_COMMAND}")
        return command

    def run(self, argv: list[str]) -> int:
        """Run one command.

        Args:
            argv: Command name followed by its arguments.

        Returns:
            Process exit status.
        """
        command = self.resolve(argv[0] if argv else None)
        bind_context(command=command.name)
        try:
            command.execute(list(argv[1:]), self)
        except TaskTrackerError as e:
            logger.debug("command_failed", error_code=e.error_code, error=e.message)
            self.err_console.print(Text(f"Error: {e.message}"))
            return e.exit_code
        finally:
            clear_context()
        return 0


def main(argv: list[str] | None = None) -> None:
    """Entry point for the task-cli script."""
    try:
        settings = get_settings()
    except pydantic.ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        print(f"Error: invalid configuration: {problems}", file=sys.stderr)
        sys.exit(1)

    configure_logging(settings)
    app = TaskCLIApp(settings)
    sys.exit(app.run(sys.argv[1:] if argv is None else argv))
