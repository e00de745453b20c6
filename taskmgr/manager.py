"""A collection of tasks with lookup, listing and a plain-text file format."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from typing import TextIO

from taskmgr.task import SimpleTask, Task, TaskType, TimedTask

_WHITESPACE = " \t\n\v\f\r"
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _parse_int(text: str) -> int:
    """Parse a leading integer, ignoring trailing text."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid priority: {text!r}")
    return int(match.group(1))


def _format_task(task: Task) -> str | None:
    done = 1 if task.done else 0
    if task.type() is TaskType.SIMPLE:
        return f"S;{task.priority};{done};{task.title};{task.description}\n"
    if task.type() is TaskType.TIMED and isinstance(task, TimedTask):
        return (
            f"T;{task.priority};{done};{task.title};"
            f"{task.description};{task.due_date}\n"
        )
    return None


def _parse_task(line: str) -> Task | None:
    """Build a task from one saved line, or return None for lines to skip."""
    stripped = line.lstrip(_WHITESPACE)
    if not stripped:
        return None
    kind, rest = stripped[0], stripped[1:]
    if rest.startswith(";"):
        rest = rest[1:]

    priority_text, _, rest = rest.partition(";")
    done_text, _, rest = rest.partition(";")
    title, _, rest = rest.partition(";")

    task: Task
    if kind == "S":
        task = SimpleTask(title, rest, _parse_int(priority_text))
    elif kind == "T":
        description, _, due_date = rest.partition(";")
        task = TimedTask(title, description, _parse_int(priority_text), due_date)
    else:
        return None
    task.done = done_text == "1"
    return task


class TaskManager:
    """Owns an ordered collection of tasks."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def add_task(self, task: Task) -> None:
        """Append a task; None and non-tasks are rejected."""
        if task is None:
            raise ValueError("add_task got None")
        if not isinstance(task, Task):
            raise TypeError(f"add_task expects a Task, got {type(task).__name__}")
        self._tasks.append(task)

    def remove_task(self, task_id: int) -> bool:
        """Remove the task with this id; return whether one was found."""
        for task in self._tasks:
            if task.id == task_id:
                self._tasks.remove(task)
                return True
        return False

    def find_task(self, task_id: int) -> Task | None:
        """Return the task with this id, or None."""
        return next((task for task in self._tasks if task.id == task_id), None)

    def list_tasks(self, show_done: bool = True, file: TextIO | None = None) -> None:
        """Print each task on its own line, optionally hiding finished ones."""
        out = sys.stdout if file is None else file
        for task in self._tasks:
            if not show_done and task.done:
                continue
            print(task, file=out)

    def save_to_file(self, filename: str) -> None:
        """Write all tasks to a file, one per line."""
        try:
            out = open(filename, "w", encoding="utf-8", newline="")
        except OSError as exc:
            raise OSError(f"Could not open file for writing: {filename}") from exc
        with out:
            for task in self._tasks:
                line = _format_task(task)
                if line is not None:
                    out.write(line)

    def load_from_file(self, filename: str) -> None:
        """Replace all tasks with those in a file; a missing file changes nothing."""
        try:
            source = open(filename, encoding="utf-8", newline="")
        except OSError:
            return
        with source:
            self._tasks.clear()
            for raw in source:
                line = raw[:-1] if raw.endswith("\n") else raw
                if not line:
                    continue
                task = _parse_task(line)
                if task is not None:
                    self.add_task(task)