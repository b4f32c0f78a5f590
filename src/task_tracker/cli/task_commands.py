"""Task tracker commands."""

from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from task_tracker.cli.commands import Command
from task_tracker.tasks.models import Task, TaskStatus, parse_timestamp

if TYPE_CHECKING:
    from task_tracker.cli.app import TaskCLIApp

STATUS_MARKERS = {
    TaskStatus.TODO: ("[ ]", "dim"),
    TaskStatus.IN_PROGRESS: ("[~]", "yellow"),
    TaskStatus.DONE: ("[x]", "green"),
}


def _arg(args: list[str], index: int) -> str | None:
    return args[index] if len(args) > index else None


def _joined(args: list[str], start: int) -> str | None:
    """Join trailing arguments so unquoted multi-word descriptions work."""
    rest = args[start:]
    return " ".join(rest) if rest else None


def format_task(task: Task) -> Text:
    """Render one task as a two-line listing entry."""
    marker, style = STATUS_MARKERS[task.status]
    created = parse_timestamp(task.created_at).astimezone().date().isoformat()

    text = Text()
    text.append(marker, style=style)
    text.append(f" [{task.id}] ", style="bold")
    text.append(task.description)
    text.append(f"\n   Status: {task.status.value} | Created: {created}", style="dim")
    return text


class AddCommand(Command):
    """Add a new task."""

    def __init__(self) -> None:
        super().__init__(
            name="add",
            description="Add a new task",
            usage='add "<description>"',
            examples=['add "Buy groceries"'],
        )

    def execute(self, args: list[str], app: "TaskCLIApp") -> None:
        task = app.store.add(_joined(args, 0))
        app.console.print(f"Task added successfully (ID: {task.id})")


class UpdateCommand(Command):
    """Change a task's description."""

    def __init__(self) -> None:
        super().__init__(
            name="update",
            description="Update a task description",
            usage='update <id> "<description>"',
            examples=['update 1 "Buy groceries and cook dinner"'],
        )

    def execute(self, args: list[str], app: "TaskCLIApp") -> None:
        app.store.update(_arg(args, 0), _joined(args, 1))
        app.console.print("Task updated successfully.")


class DeleteCommand(Command):
    """Delete a task."""

    def __init__(self) -> None:
        super().__init__(
            name="delete",
            description="Delete a task",
            usage="delete <id>",
            examples=["delete 1"],
        )

    def execute(self, args: list[str], app: "TaskCLIApp") -> None:
        app.store.delete(_arg(args, 0))
        app.console.print("Task deleted successfully.")


class MarkStatusCommand(Command):
    """Move a task to a fixed status."""

    status: TaskStatus

    def __init__(self, status: TaskStatus) -> None:
        self.status = status
        super().__init__(
            name=f"mark-{status.value}",
            description=f"Mark a task as {status.value}",
            usage=f"mark-{status.value} <id>",
            examples=[f"mark-{status.value} 1"],
        )

    def execute(self, args: list[str], app: "TaskCLIApp") -> None:
        app.store.set_status(_arg(args, 0), self.status)
        app.console.print(f"Task marked as {self.status.value}.")


class MarkInProgressCommand(MarkStatusCommand):
    def __init__(self) -> None:
        super().__init__(TaskStatus.IN_PROGRESS)


class MarkDoneCommand(MarkStatusCommand):
    def __init__(self) -> None:
        super().__init__(TaskStatus.DONE)


class ListCommand(Command):
    """List tasks, optionally filtered by status."""

    def __init__(self) -> None:
        super().__init__(
            name="list",
            description=f"List tasks (optional filter: {', '.join(TaskStatus.values())})",
            usage="list [status]",
            examples=["list", "list done", "list in-progress"],
        )

    def execute(self, args: list[str], app: "TaskCLIApp") -> None:
        # An empty filter argument lists everything.
        tasks = app.store.list_tasks(_arg(args, 0) or None)
        if not tasks:
            app.console.print("No tasks found.")
            return

        app.console.print(Text("Tasks:", style="bold"))
        for task in tasks:
            app.console.print(format_task(task))


class HelpCommand(Command):
    """Display usage information."""

    def __init__(self) -> None:
        super().__init__(
            name="help",
            description="Show this help message",
            aliases=["--help", "-h"],
            usage="--help, -h",
        )

    def execute(self, args: list[str], app: "TaskCLIApp") -> None:
        table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
        table.add_column("Usage", style="bold cyan", no_wrap=True)
        table.add_column("Description")

        examples: list[str] = []
        for cmd in app.command_registry.all_commands():
            table.add_row(Text(cmd.usage), Text(cmd.description))
            examples.extend(cmd.examples)

        app.console.print(Text("Task Tracker CLI", style="bold"))
        app.console.print()
        app.console.print("Commands:")
        app.console.print(table)
        if examples:
            app.console.print()
            app.console.print("Examples:")
            for example in examples:
                app.console.print(Text(f"  {app.prog} {example}"))


TASK_COMMANDS: list[type[Command]] = [
    AddCommand,
    UpdateCommand,
    DeleteCommand,
    MarkInProgressCommand,
    MarkDoneCommand,
    ListCommand,
    HelpCommand,
]
