"""Ordered, named collection of tasks."""

import logging
from typing import Any, Callable, Iterator, Optional

from rich.table import Table
from rich.text import Text

from .config import config
from .exceptions import TaskIndexError, TaskTypeError
from .task import Task

logger = logging.getLogger(__name__)


class TaskList:
    """
    An ordered list of tasks with a name used for rendering.

    Insertion order is the only order and duplicate titles are allowed.
    Lists returned by filter(), all_done() and all_not_done() are new
    TaskList objects holding the same Task instances, so marking a task
    through a filtered list also changes it in the source list.

    Positional operations (item_at, mark_done_at, mark_undone_at,
    remove_at) take a 0-based index and raise TaskIndexError when it does
    not name an existing item. Negative indices are not wrapped.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name if name is not None else config.lists.default_name
        self._items: list[Task] = []

    def _check_index(self, index: Any) -> None:
        """Raise TaskIndexError unless index names an existing item."""
        valid = (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < len(self._items)
        )
        if not valid:
            logger.debug("Rejected index %r for %r (size %d)", index, self.name, len(self._items))
            raise TaskIndexError(index=index, size=len(self._items))

    # ==================== Size and access ====================

    def size(self) -> int:
        """Number of tasks in the list."""
        return len(self._items)

    def to_list(self) -> list[Task]:
        """Shallow copy of the tasks, in order."""
        return list(self._items)

    def first(self) -> Optional[Task]:
        """First task, or None if the list is empty."""
        return self._items[0] if self._items else None

    def last(self) -> Optional[Task]:
        """Last task, or None if the list is empty."""
        return self._items[-1] if self._items else None

    def item_at(self, index: int) -> Task:
        """
        Get the task at a position.

        Raises:
            TaskIndexError: If there is no task at index
        """
        self._check_index(index)
        return self._items[index]

    # ==================== Adding and removing ====================

    def add(self, item: Task) -> None:
        """
        Append a task to the end of the list.

        Raises:
            TaskTypeError: If item is not a Task (strings, numbers,
                sequences and other TaskLists are all rejected)
        """
        if not isinstance(item, Task):
            logger.debug("Rejected %s added to %r", type(item).__name__, self.name)
            raise TaskTypeError(value=item)

        self._items.append(item)
        logger.debug("Added %r to %r", item.title, self.name)

    def shift(self) -> Optional[Task]:
        """Remove and return the first task, or None if the list is empty."""
        if not self._items:
            return None
        task = self._items.pop(0)
        logger.debug("Shifted %r from %r", task.title, self.name)
        return task

    def pop(self) -> Optional[Task]:
        """Remove and return the last task, or None if the list is empty."""
        if not self._items:
            return None
        task = self._items.pop()
        logger.debug("Popped %r from %r", task.title, self.name)
        return task

    def remove_at(self, index: int) -> list[Task]:
        """
        Remove the task at a position.

        Returns:
            One-element list holding the removed task

        Raises:
            TaskIndexError: If there is no task at index
        """
        self._check_index(index)
        removed = [self._items.pop(index)]
        logger.debug("Removed %r at %d from %r", removed[0].title, index, self.name)
        return removed

    # ==================== Completion ====================

    def mark_done_at(self, index: int) -> None:
        """Mark the task at index as done. Raises TaskIndexError."""
        self._check_index(index)
        self._items[index].mark_done()

    def mark_undone_at(self, index: int) -> None:
        """Mark the task at index as not done. Raises TaskIndexError."""
        self._check_index(index)
        self._items[index].mark_undone()

    def mark_all_done(self) -> None:
        for task in self._items:
            task.mark_done()
        logger.debug("Marked %d task(s) done in %r", len(self._items), self.name)

    def mark_all_undone(self) -> None:
        for task in self._items:
            task.mark_undone()
        logger.debug("Marked %d task(s) undone in %r", len(self._items), self.name)

    def mark_done(self, title: str) -> None:
        """Mark the first task with this exact title as done; no-op if none."""
        task = self.find_by_title(title)
        if task is not None:
            task.mark_done()

    def is_done(self) -> bool:
        """True if every task is done (an empty list counts as done)."""
        return all(task.is_done for task in self._items)

    # ==================== Iteration and queries ====================

    def for_each(self, callback: Callable[[Task], Any]) -> None:
        """Call callback once per task, in order. Return values are ignored."""
        for task in self.to_list():
            callback(task)

    def filter(self, predicate: Callable[[Task], bool]) -> "TaskList":
        """
        Select tasks matching a predicate.

        Args:
            predicate: Called with each task; truthy results are kept

        Returns:
            New TaskList with the same name, holding the same Task objects
            in their original order
        """
        selected = TaskList(self.name)
        selected._items = [task for task in self._items if predicate(task)]
        logger.debug("Filtered %r: %d of %d task(s)", self.name, selected.size(), self.size())
        return selected

    def find_by_title(self, title: str) -> Optional[Task]:
        """First task whose title equals title exactly, or None."""
        for task in self._items:
            if task.title == title:
                return task
        return None

    def all_done(self) -> "TaskList":
        """New TaskList of the tasks currently done."""
        return self.filter(lambda task: task.is_done)

    def all_not_done(self) -> "TaskList":
        """New TaskList of the tasks not yet done."""
        return self.filter(lambda task: not task.is_done)

    # ==================== Python protocols ====================

    def __len__(self):
        return len(self._items)

    def __iter__(self) -> Iterator[Task]:
        # Snapshot so callers may add or remove while iterating
        return iter(self.to_list())

    def __contains__(self, item):
        return any(task is item for task in self._items)

    def __eq__(self, other):
        if not isinstance(other, TaskList):
            return NotImplemented
        return self.name == other.name and self._items == other._items

    def __str__(self):
        lines = [f"---- {self.name} ----"]
        lines.extend(str(task) for task in self._items)
        return "\n".join(lines)

    def __repr__(self):
        return f"TaskList(name={self.name!r}, size={len(self._items)})"

    def __rich__(self) -> Table:
        """Render as a rich Table, e.g. console.print(task_list)."""
        table = Table(title=self.name, show_header=True)
        table.add_column("#", style="dim", width=4)
        table.add_column("", width=3)  # Status icon
        table.add_column("Title")

        for index, task in enumerate(self._items):
            table.add_row(
                str(index),
                Text(task.status_icon),
                Text(task.title),
                style="dim" if task.is_done else "",
            )

        return table
