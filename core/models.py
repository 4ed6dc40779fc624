"""Data models for the task tracker with Pydantic validation"""
from enum import Enum
from datetime import date
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict

from config import Config


class TaskKind(Enum):
    """Kinds of tasks, valued by their one-letter tag"""
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def tag(self) -> str:
        return self.value

    @property
    def label(self) -> Optional[str]:
        """Label the date is rendered under, None for undated kinds"""
        return _DATE_LABELS.get(self)


_DATE_LABELS = {
    TaskKind.DEADLINE: "by",
    TaskKind.EVENT: "at",
}


class Task(BaseModel):
    """A single trackable item"""
    model_config = ConfigDict(validate_assignment=True, use_enum_values=False)

    description: str = Field(..., min_length=1)
    done: bool = False
    kind: TaskKind = Field(default=TaskKind.TODO)
    when: Optional[date] = None

    @field_validator('description')
    @classmethod
    def validate_description_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Description cannot be only whitespace')
        return v

    @model_validator(mode='after')
    def validate_when_matches_kind(self) -> 'Task':
        if self.kind == TaskKind.TODO and self.when is not None:
            raise ValueError('A to-do task cannot have a date')
        if self.kind != TaskKind.TODO and self.when is None:
            raise ValueError(f'A {self.kind.name.lower()} task requires a date')
        return self

    @classmethod
    def todo(cls, description: str) -> 'Task':
        return cls(description=description)

    @classmethod
    def deadline(cls, description: str, by: date) -> 'Task':
        return cls(description=description, kind=TaskKind.DEADLINE, when=by)

    @classmethod
    def event(cls, description: str, at: date) -> 'Task':
        return cls(description=description, kind=TaskKind.EVENT, when=at)

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def mark_done(self) -> None:
        self.done = True

    def to_dict(self) -> Dict[str, Any]:
        """Serialization for JSON snapshots"""
        data = self.model_dump(mode='json')
        data['kind'] = self.kind.name
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Task':
        """Deserialization from a snapshot record"""
        data = dict(data)
        # kind may be stored by name (TODO) or by tag (T)
        if isinstance(data.get('kind'), str):
            try:
                data['kind'] = TaskKind[data['kind']]
            except KeyError:
                data['kind'] = TaskKind(data['kind'])
        return cls(**data)

    def __str__(self) -> str:
        text = f"[{self.kind.tag}][{self.status_icon}] {self.description}"
        if self.when is not None:
            text += f" ({self.kind.label}: {self.when.strftime(Config.DATE_DISPLAY_FORMAT)})"
        return text
