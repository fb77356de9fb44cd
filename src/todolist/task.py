"""Task model: a title and a done flag."""


class Task:
    """
    A single unit of work.

    Attributes:
        title: Human-readable title, fixed at construction
        is_done: Whether the task has been completed

    Equality is identity: two tasks with the same title are still
    distinct items.
    """

    def __init__(self, title: str, done: bool = False):
        self._title = title
        self._done = bool(done)

    @property
    def title(self) -> str:
        """Task title (read-only)."""
        return self._title

    @property
    def is_done(self) -> bool:
        """Check if task is completed."""
        return self._done

    def mark_done(self) -> "Task":
        """Mark task as completed."""
        self._done = True
        return self

    def mark_undone(self) -> "Task":
        """Mark task as not completed."""
        self._done = False
        return self

    @property
    def status_icon(self) -> str:
        """Get status icon for display."""
        return "[X]" if self._done else "[ ]"

    def __str__(self):
        return f"{self.status_icon} {self._title}"

    def __repr__(self):
        return f"Task(title={self._title!r}, done={self._done})"
