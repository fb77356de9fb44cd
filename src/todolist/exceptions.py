"""Exceptions raised by task lists."""

from dataclasses import dataclass
from typing import Any


class TaskListError(Exception):
    """Base class for task list errors."""


@dataclass
class TaskTypeError(TaskListError, TypeError):
    """
    Raised when something other than a Task is added to a TaskList.

    The list is left unchanged.
    """
    value: Any

    def __str__(self):
        return f"TaskList can only contain Task objects, got {type(self.value).__name__}: {self.value!r}"


@dataclass
class TaskIndexError(TaskListError, IndexError):
    """
    Raised when an index does not refer to an existing item.

    The list is left unchanged.
    """
    index: Any
    size: int

    def __str__(self):
        return f"No task at index {self.index!r} (list has {self.size} item(s))"
