"""Core module for the task tracker"""
from core.models import Task, TaskKind
from core.commands import (
    Command,
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
from core.exceptions import TaskTrackerError, ParseError, TaskIndexError, StorageError
from core.task_store import TaskStore
from core.executor import CommandExecutor, CommandResult
from core.storage import TaskStorage

__all__ = [
    # Models
    'Task',
    'TaskKind',
    # Commands
    'Command',
    'ByeCommand',
    'ListCommand',
    'DoneCommand',
    'DeleteCommand',
    'ToDoCommand',
    'DeadlineCommand',
    'EventCommand',
    'FindCommand',
    'SortCommand',
    'HelpCommand',
    # Errors
    'TaskTrackerError',
    'ParseError',
    'TaskIndexError',
    'StorageError',
    # Task list
    'TaskStore',
    'CommandExecutor',
    'CommandResult',
    'TaskStorage',
]
