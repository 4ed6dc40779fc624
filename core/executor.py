"""Applies parsed commands to a task store"""
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Type

from core.commands import (
    Command,
    KEYWORDS,
    ByeCommand,
    ListCommand,
    DoneCommand,
    DeleteCommand,
    ToDoCommand,
    DeadlineCommand,
    EventCommand,
    FindCommand,
    SortCommand,
    HelpCommand,
)
from core.models import Task
from core.task_store import TaskStore
from utils.logging_config import get_logger

logger = get_logger('executor')

HELP_TOPICS: Dict[str, str] = {
    'bye': "bye\n  Save your tasks and exit.",
    'list': "list\n  Show every task with its task number.",
    'done': "done <task number>\n  Mark a task as done.",
    'delete': "delete <task number>\n  Remove a task; later task numbers move up by one.",
    'todo': "todo <description>\n  Add a task without a date.",
    'deadline': "deadline <description> /by <YYYY-MM-DD>\n  Add a task that must be done by a date.",
    'event': "event <description> /at <YYYY-MM-DD>\n  Add a task that happens on a date.",
    'find': "find <text>\n  Show tasks whose description contains the text (case-sensitive).",
    'sort': "sort\n  Order tasks by date, oldest first; tasks without a date go last.",
    'help': "help <command>\n  Show how to use a command.",
}


@dataclass
class CommandResult:
    """Outcome of one command"""
    messages: List[str] = field(default_factory=list)
    exit: bool = False
    mutates: bool = False


def _indent(task: Task) -> str:
    return f"  {task}"


def _count_line(count: int) -> str:
    noun = "task" if count == 1 else "tasks"
    return f"Now you have {count} {noun} in the list."


def _numbered(tasks: List[Task]) -> List[str]:
    return [f"{i}.{task}" for i, task in enumerate(tasks, 1)]


class CommandExecutor:
    """
    Dispatches commands to handlers that act on a TaskStore.

    Errors from the store (TaskIndexError) propagate to the caller.
    """

    def __init__(self, store: TaskStore):
        self.store = store
        self._handlers: Dict[Type[Command], Callable[..., CommandResult]] = {
            ByeCommand: self._bye,
            ListCommand: self._list,
            DoneCommand: self._done,
            DeleteCommand: self._delete,
            ToDoCommand: self._todo,
            DeadlineCommand: self._deadline,
            EventCommand: self._event,
            FindCommand: self._find,
            SortCommand: self._sort,
            HelpCommand: self._help,
        }

    def execute(self, command: Command) -> CommandResult:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported command: {command!r}")

        logger.info(f"Executing {command.kind}", extra={'command': command.model_dump(mode='json')})
        return handler(command)

    def _added(self, task: Task) -> CommandResult:
        self.store.add(task)
        return CommandResult(
            messages=["Got it. I've added this task:", _indent(task), _count_line(len(self.store))],
            mutates=True,
        )

    def _bye(self, command: ByeCommand) -> CommandResult:
        return CommandResult(messages=["Bye. Hope to see you again soon!"], exit=True)

    def _list(self, command: ListCommand) -> CommandResult:
        tasks = self.store.list()
        if not tasks:
            return CommandResult(messages=["Your task list is empty."])
        return CommandResult(messages=["Here are the tasks in your list:"] + _numbered(tasks))

    def _done(self, command: DoneCommand) -> CommandResult:
        task = self.store.mark_done(command.index)
        logger.info(f"Marked task {command.index} as done", extra={'task_index': command.index})
        return CommandResult(
            messages=["Nice! I've marked this task as done:", _indent(task)],
            mutates=True,
        )

    def _delete(self, command: DeleteCommand) -> CommandResult:
        task = self.store.delete(command.index)
        logger.info(f"Deleted task {command.index}", extra={'task_index': command.index})
        return CommandResult(
            messages=["Noted. I've removed this task:", _indent(task), _count_line(len(self.store))],
            mutates=True,
        )

    def _todo(self, command: ToDoCommand) -> CommandResult:
        return self._added(Task.todo(command.description))

    def _deadline(self, command: DeadlineCommand) -> CommandResult:
        return self._added(Task.deadline(command.description, command.by))

    def _event(self, command: EventCommand) -> CommandResult:
        return self._added(Task.event(command.description, command.at))

    def _find(self, command: FindCommand) -> CommandResult:
        matches = self.store.find(command.query)
        if not matches:
            return CommandResult(messages=[f'No tasks match "{command.query}".'])
        return CommandResult(messages=["Here are the matching tasks in your list:"] + _numbered(matches))

    def _sort(self, command: SortCommand) -> CommandResult:
        self.store.sort()
        messages = ["Sorted your tasks by date:"] + _numbered(self.store.list())
        return CommandResult(messages=messages, mutates=True)

    def _help(self, command: HelpCommand) -> CommandResult:
        usage = HELP_TOPICS.get(command.topic.lower())
        if usage is None:
            return CommandResult(messages=[
                f'No help available for "{command.topic}". Known commands: {", ".join(KEYWORDS)}'
            ])
        return CommandResult(messages=usage.split("\n"))
