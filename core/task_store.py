"""In-memory ordered task list addressed by 1-based task numbers"""
from datetime import date
from typing import Iterable, Iterator, List, Optional, Tuple

from core.exceptions import TaskIndexError
from core.models import Task


class TaskStore:
    """
    Ordered collection of tasks.

    Insertion order is the display and storage order until ``sort`` is
    called. Every index accepted or returned is 1-based; deleting or
    sorting renumbers the tasks that follow.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks) if tasks else []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def _position(self, index: int) -> int:
        if not 1 <= index <= len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))
        return index - 1

    def add(self, task: Task) -> int:
        """Append a task and return its task number"""
        self._tasks.append(task)
        return len(self._tasks)

    def get(self, index: int) -> Task:
        return self._tasks[self._position(index)]

    def mark_done(self, index: int) -> Task:
        """Mark a task as done; marking a finished task again is a no-op"""
        task = self._tasks[self._position(index)]
        task.mark_done()
        return task

    def delete(self, index: int) -> Task:
        """Remove a task and return it"""
        return self._tasks.pop(self._position(index))

    def list(self) -> List[Task]:
        return list(self._tasks)

    def find(self, query: str) -> List[Task]:
        """Tasks whose description contains ``query`` (case-sensitive)"""
        return [task for task in self._tasks if query in task.description]

    def sort(self) -> None:
        """
        Order dated tasks by date, oldest first, followed by to-dos.

        The sort is stable, so tasks sharing a date and all to-dos keep
        their relative order.
        """
        self._tasks.sort(key=_sort_key)


def _sort_key(task: Task) -> Tuple[bool, date]:
    if task.when is None:
        return (True, date.min)
    return (False, task.when)
