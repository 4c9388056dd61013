"""Domain models for Todo Store."""

from enum import Enum


class _Ordered(str, Enum):
    """String enum that sorts by declaration order, not by value."""

    @property
    def rank(self) -> int:
        return list(type(self)).index(self)


class Priority(_Ordered):
    """Priority level for a todo item."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Status(_Ordered):
    """Workflow status for a todo item."""

    BACKLOG = "backlog"
    IN_PROGRESS = "in-progress"
    DONE = "done"


class QuerySort(str, Enum):
    """Field a search result is ordered by."""

    PRIORITY = "priority"
    STATUS = "status"
    DEADLINE = "deadline"
