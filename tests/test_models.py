"""Unit tests for core/models.py and core/commands.py"""
import pytest
from datetime import date
from pydantic import ValidationError

from core.models import Task, TaskKind
from core.commands import ToDoCommand, DeadlineCommand, DoneCommand, KEYWORDS


class TestTaskKind:
    """Tests for TaskKind enum"""

    def test_tags(self):
        """Each kind renders with a one-letter tag"""
        assert TaskKind.TODO.tag == "T"
        assert TaskKind.DEADLINE.tag == "D"
        assert TaskKind.EVENT.tag == "E"

    def test_labels(self):
        assert TaskKind.DEADLINE.label == "by"
        assert TaskKind.EVENT.label == "at"
        assert TaskKind.TODO.label is None


class TestTask:
    """Tests for Task model"""

    def test_todo_defaults(self):
        task = Task.todo("read book")
        assert task.kind == TaskKind.TODO
        assert task.done is False
        assert task.when is None

    def test_empty_description_rejected(self):
        with pytest.raises(ValidationError):
            Task(description="")

    def test_blank_description_rejected(self):
        with pytest.raises(ValidationError):
            Task(description="   ")

    def test_todo_with_date_rejected(self):
        """A date is only allowed on deadlines and events"""
        with pytest.raises(ValidationError):
            Task(description="read book", when=date(2024, 1, 1))

    @pytest.mark.parametrize("kind", [TaskKind.DEADLINE, TaskKind.EVENT])
    def test_dated_kind_without_date_rejected(self, kind):
        with pytest.raises(ValidationError):
            Task(description="submit", kind=kind)

    def test_mark_done(self):
        task = Task.todo("read book")
        task.mark_done()
        assert task.done is True
        task.mark_done()
        assert task.done is True

    def test_str_todo(self):
        assert str(Task.todo("read book")) == "[T][ ] read book"

    def test_str_done_deadline(self):
        task = Task.deadline("submit report", date(2024, 3, 1))
        task.mark_done()
        assert str(task) == "[D][X] submit report (by: Mar 01 2024)"

    def test_str_event(self):
        task = Task.event("meeting", date(2024, 12, 25))
        assert str(task) == "[E][ ] meeting (at: Dec 25 2024)"


class TestTaskSerialization:
    """Tests for to_dict / from_dict"""

    def test_to_dict(self):
        data = Task.deadline("submit", date(2024, 3, 1)).to_dict()
        assert data == {
            "description": "submit",
            "done": False,
            "kind": "DEADLINE",
            "when": "2024-03-01",
        }

    def test_from_dict_accepts_kind_name_or_tag(self):
        by_name = Task.from_dict({"description": "a", "kind": "EVENT", "when": "2024-01-02"})
        by_tag = Task.from_dict({"description": "a", "kind": "E", "when": "2024-01-02"})
        assert by_name == by_tag
        assert by_name.when == date(2024, 1, 2)

    def test_from_dict_rejects_unknown_kind(self):
        with pytest.raises(ValueError):
            Task.from_dict({"description": "a", "kind": "X"})

    def test_from_dict_does_not_modify_input(self):
        data = {"description": "a", "kind": "TODO"}
        Task.from_dict(data)
        assert data["kind"] == "TODO"


class TestCommands:
    """Tests for the command records"""

    def test_commands_are_frozen(self):
        command = ToDoCommand(description="read book")
        with pytest.raises(ValidationError):
            command.description = "other"

    def test_commands_compare_by_value(self):
        assert DoneCommand(index=2) == DoneCommand(index=2)
        assert DeadlineCommand(description="a", by=date(2024, 1, 1)).kind == "deadline"

    def test_keyword_priority_order(self):
        assert KEYWORDS == (
            'bye', 'deadline', 'delete', 'done', 'event', 'list', 'todo', 'find', 'sort', 'help'
        )
