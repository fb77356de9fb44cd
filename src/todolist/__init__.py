"""In-memory task lists."""

from .task import Task
from .task_list import TaskList
from .exceptions import TaskListError, TaskTypeError, TaskIndexError
from .logging_setup import setup_logging

__all__ = [
    "Task",
    "TaskList",
    "TaskListError",
    "TaskTypeError",
    "TaskIndexError",
    "setup_logging",
]
