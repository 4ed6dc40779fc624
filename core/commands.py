"""Typed commands produced by the command parser.

Each command is an immutable record of what the user asked for. Commands
carry no behaviour; ``core.executor.CommandExecutor`` applies them to a
``TaskStore``.
"""
from datetime import date
from typing import Literal, Union
from pydantic import BaseModel, ConfigDict, Field


class BaseCommand(BaseModel):
    model_config = ConfigDict(frozen=True)


class ByeCommand(BaseCommand):
    kind: Literal['bye'] = 'bye'


class ListCommand(BaseCommand):
    kind: Literal['list'] = 'list'


class DoneCommand(BaseCommand):
    kind: Literal['done'] = 'done'
    index: int


class DeleteCommand(BaseCommand):
    kind: Literal['delete'] = 'delete'
    index: int


class ToDoCommand(BaseCommand):
    kind: Literal['todo'] = 'todo'
    description: str = Field(..., min_length=1)


class DeadlineCommand(BaseCommand):
    kind: Literal['deadline'] = 'deadline'
    description: str = Field(..., min_length=1)
    by: date


class EventCommand(BaseCommand):
    kind: Literal['event'] = 'event'
    description: str = Field(..., min_length=1)
    at: date


class FindCommand(BaseCommand):
    kind: Literal['find'] = 'find'
    query: str = Field(..., min_length=1)


class SortCommand(BaseCommand):
    kind: Literal['sort'] = 'sort'


class HelpCommand(BaseCommand):
    kind: Literal['help'] = 'help'
    topic: str = Field(..., min_length=1)


Command = Union[
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
]

# Keywords in the order the parser tries them
KEYWORDS = ('bye', 'deadline', 'delete', 'done', 'event', 'list', 'todo', 'find', 'sort', 'help')
