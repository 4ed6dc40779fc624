"""CLI interface for the task tracker"""
import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from typing import Callable, Optional

from core.exceptions import ParseError, StorageError, TaskTrackerError
from core.executor import CommandExecutor
from core.storage import TaskStorage
from core.task_store import TaskStore
from parsers.command_parser import CommandParser
from config import Config
from utils.logging_config import get_logger, setup_logging

logger = get_logger('cli')

console = Console(emoji=False)

FRAME_LINE = "_" * 60

LOGO = (
    " _____         _        \n"
    "|_   _|_ _ ___| | _____ \n"
    "  | |/ _` / __| |/ / __|\n"
    "  | | (_| \\__ \\   <\\__ \\\n"
    "  |_|\\__,_|___/_|\\_\\___/\n"
)


class Repl:
    """
    Interactive read-eval-print loop.

    Owns the session's TaskStore; reads one line at a time, parses it,
    executes the command and prints the framed result. Only ``bye`` or
    end of input ends the loop.
    """

    def __init__(
        self,
        store: TaskStore,
        storage: Optional[TaskStorage] = None,
        out: Console = None,
        read_line: Callable[[], str] = input,
        indent: int = None,
    ):
        self.store = store
        self.storage = storage
        self.parser = CommandParser()
        self.executor = CommandExecutor(store)
        self.out = out or console
        self.read_line = read_line
        self.indent = " " * (Config.INDENT if indent is None else indent)

    # ==================== Output ====================

    def say(self, text: str) -> None:
        """Print text indented, without markup interpretation"""
        for line in text.split("\n"):
            self.out.print(f"{self.indent}{line}", markup=False, emoji=False, highlight=False, soft_wrap=True)

    def frame(self) -> None:
        self.out.print(f"{self.indent}{FRAME_LINE}", style="dim", markup=False, emoji=False, highlight=False, soft_wrap=True)

    def error(self, message: str) -> None:
        self.say(f"OOPS!!! {message}")

    def greet(self) -> None:
        self.frame()
        self.say("Hello from\n" + LOGO)
        self.say("What can I do for you?")
        self.frame()

    # ==================== Loop ====================

    def handle(self, line: str) -> bool:
        """Process one line; returns False when the session should end"""
        try:
            command = self.parser.parse(line)
        except ParseError as e:
            logger.info(f"Parse error: {e.reason}", extra={'keyword': e.keyword})
            self.error(e.reason)
            return True

        if command is None:
            known = ", ".join(self.parser.keywords)
            words = line.split()
            if not words:
                self.error(f"Please type a command. Try: {known}")
            else:
                self.error(f'I don\'t know what "{words[0]}" means. Try: {known}')
            return True

        try:
            result = self.executor.execute(command)
        except TaskTrackerError as e:
            logger.info(f"Command failed: {e}", extra={'command': command.kind})
            self.error(str(e))
            return True

        for message in result.messages:
            self.say(message)

        if result.exit or (result.mutates and Config.AUTOSAVE):
            self.save()
        return not result.exit

    def save(self) -> None:
        if self.storage is None:
            return
        try:
            self.storage.save_tasks(self.store.list())
        except StorageError as e:
            logger.error(str(e))
            self.error(str(e))

    def run(self) -> None:
        self.greet()
        running = True
        while running:
            try:
                line = self.read_line()
            except EOFError:
                self.save()
                break

            self.frame()
            running = self.handle(line)
            self.frame()


def _start_logging(storage: Optional[TaskStorage]) -> None:
    """Log next to the task list being used; without one, only to the console"""
    setup_logging(
        log_dir=Config.get_log_dir(storage.data_dir) if storage else None,
        level=Config.get_log_level(),
        json_output=storage is not None,
        console_output=Config.LOG_CONSOLE,
    )


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx):
    """Task tracker - keep track of to-dos, deadlines and events"""
    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@cli.command()
@click.option('--data-dir', default=None, type=click.Path(file_okay=False), help='Directory holding tasks.json')
@click.option('--no-save', is_flag=True, default=False, help='Do not load or save the task list')
def run(data_dir, no_save):
    """Start the interactive session"""
    storage = None if no_save else TaskStorage(data_dir=data_dir)
    _start_logging(storage)
    store = TaskStore(storage.load_tasks() if storage else None)
    logger.info(f"Session started with {len(store)} tasks")
    Repl(store, storage=storage).run()


@cli.command()
@click.option('--data-dir', default=None, type=click.Path(file_okay=False), help='Directory holding tasks.json')
def show(data_dir):
    """Show the saved task list"""
    storage = TaskStorage(data_dir=data_dir)
    _start_logging(storage)
    tasks = storage.load_tasks()

    if not tasks:
        console.print("[yellow]No tasks saved. Use 'tasks run' to add some.[/yellow]")
        return

    table = Table(title=f"Tasks ({len(tasks)})")
    table.add_column("#", style="cyan", width=4)
    table.add_column("Type", style="magenta", width=9)
    table.add_column("Status", width=7)
    table.add_column("Description", style="white")
    table.add_column("Date", style="red", width=12)

    for i, task in enumerate(tasks, 1):
        status_style = "green" if task.done else "yellow"
        table.add_row(
            str(i),
            task.kind.name.lower(),
            f"[{status_style}]{'done' if task.done else 'open'}[/{status_style}]",
            escape(task.description),
            task.when.strftime(Config.DATE_DISPLAY_FORMAT) if task.when else "-"
        )

    console.print(table)


if __name__ == '__main__':
    cli()
