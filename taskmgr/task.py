"""Task kinds: an abstract base task plus simple and timed tasks."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from enum import IntEnum

MAX_PRIORITY = 10
DEFAULT_PRIORITY = 5
DEFAULT_TITLE = "New task"
DEFAULT_DUE_DATE = "geen datum"


class TaskType(IntEnum):
    """The kind of a task."""

    SIMPLE = 0
    TIMED = 1


def _to_byte(value: int) -> int:
    """Reduce a priority to the single-byte range it is stored in."""
    return int(value) % 256


class Task(ABC):
    """A unit of work with a unique id, title, description, priority and done flag."""

    _ids = itertools.count(1)

    def __init__(
        self,
        title: str = DEFAULT_TITLE,
        description: str = "",
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        self._id = next(Task._ids)
        self.title = title
        self.description = description
        self._priority = _to_byte(priority)
        self.done = False

    @property
    def id(self) -> int:
        """The task's unique id, assigned at creation."""
        return self._id

    @property
    def priority(self) -> int:
        """The priority; assignments above the maximum are capped to it."""
        return self._priority

    @priority.setter
    def priority(self, value: int) -> None:
        self._priority = min(_to_byte(value), MAX_PRIORITY)

    def copy(self) -> Task:
        """Return a copy with the same fields but a fresh id."""
        clone = type(self)(self.title, self.description, self._priority)
        clone.done = self.done
        return clone

    def _done_marker(self) -> str:
        return "[DONE] " if self.done else ""

    @abstractmethod
    def type(self) -> TaskType:
        """The kind of this task."""

    @abstractmethod
    def __str__(self) -> str:
        """A one-line human-readable description."""


class SimpleTask(Task):
    """A task without a deadline."""

    def type(self) -> TaskType:
        return TaskType.SIMPLE

    def __str__(self) -> str:
        return (
            f"[Simple] #{self.id} (prio {self.priority}) "
            f"{self._done_marker()}{self.title} - {self.description}"
        )


class TimedTask(Task):
    """A task with a due date."""

    def __init__(
        self,
        title: str = DEFAULT_TITLE,
        description: str = "",
        priority: int = DEFAULT_PRIORITY,
        due_date: str = DEFAULT_DUE_DATE,
    ) -> None:
        super().__init__(title, description, priority)
        self.due_date = due_date

    def copy(self) -> TimedTask:
        clone = super().copy()
        clone.due_date = self.due_date
        return clone

    def type(self) -> TaskType:
        return TaskType.TIMED

    def __str__(self) -> str:
        return (
            f"[Timed]  #{self.id} (prio {self.priority}) "
            f"{self._done_marker()}{self.title} - {self.description}"
            f"  (due: {self.due_date})"
        )