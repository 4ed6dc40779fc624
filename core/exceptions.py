"""Errors raised by the task tracker core"""
from typing import Optional


class TaskTrackerError(Exception):
    """Base class for errors reported to the user without ending the session"""


class ParseError(TaskTrackerError):
    """A recognised command keyword with missing or malformed arguments"""

    def __init__(self, reason: str, keyword: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.keyword = keyword


class TaskIndexError(TaskTrackerError, IndexError):
    """A 1-based task number outside the bounds of the task list"""

    def __init__(self, index: int, size: int):
        if size == 0:
            message = "There are no tasks in the list"
        else:
            message = f"Task number {index} is out of range (1-{size})"
        super().__init__(message)
        self.index = index
        self.size = size


class StorageError(TaskTrackerError):
    """The task list snapshot could not be written"""
