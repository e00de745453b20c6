"""Interactive menu-driven console for a task manager."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable
from typing import TextIO

from taskmgr.manager import TaskManager
from taskmgr.task import SimpleTask, TimedTask

DEFAULT_FILENAME = "tasks.txt"

MENU = (
    "\n=== Task Manager ===\n"
    "1. Toon alle taken\n"
    "2. Voeg simple task toe\n"
    "3. Voeg timed task toe\n"
    "4. Verwijder task\n"
    "5. Markeer task als done\n"
    "6. Save naar bestand\n"
    "7. Load uit bestand\n"
    "0. Stop\n"
    "> "
)

_WHITESPACE = " \t\n\v\f\r"
_INT = re.compile(r"[+-]?[0-9]+")


class _Input:
    """Reads numbers and lines from a text stream the way a console prompt does."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._rest = ""

    def _next_line(self) -> bool:
        line = self._stream.readline()
        self._rest = line
        return bool(line)

    def read_int(self) -> int:
        """Skip whitespace, including newlines, and read an integer."""
        while True:
            self._rest = self._rest.lstrip(_WHITESPACE)
            if self._rest:
                break
            if not self._next_line():
                raise EOFError
        match = _INT.match(self._rest)
        if match is None:
            self._rest = ""
            raise ValueError("Ongeldige input.")
        self._rest = self._rest[match.end():]
        return int(match.group())

    def discard_line(self) -> None:
        """Drop the remainder of the current line."""
        if not self._rest:
            self._next_line()
        self._rest = ""

    def read_line(self) -> str:
        """Return the rest of the current line without its newline."""
        if not self._rest and not self._next_line():
            return ""
        line, self._rest = self._rest, ""
        return line[:-1] if line.endswith("\n") else line


Say = Callable[[str], None]


def _read_priority(reader: _Input, say: Say) -> int:
    say("Prioriteit (0-10): ")
    priority = reader.read_int()
    reader.discard_line()
    return priority


def _list(manager: TaskManager, reader: _Input, say: Say) -> None:
    for task in manager:
        say(f"{task}\n")


def _add_simple(manager: TaskManager, reader: _Input, say: Say) -> None:
    say("Titel: ")
    title = reader.read_line()
    say("Beschrijving: ")
    description = reader.read_line()
    priority = _read_priority(reader, say)
    manager.add_task(SimpleTask(title, description, priority))


def _add_timed(manager: TaskManager, reader: _Input, say: Say) -> None:
    say("Titel: ")
    title = reader.read_line()
    say("Beschrijving: ")
    description = reader.read_line()
    priority = _read_priority(reader, say)
    say("Due date (bv. 2025-12-31 23:59): ")
    due_date = reader.read_line()
    manager.add_task(TimedTask(title, description, priority, due_date))


def _read_id(reader: _Input, say: Say, prompt: str) -> int:
    say(prompt)
    task_id = reader.read_int()
    reader.discard_line()
    return task_id


def _remove(manager: TaskManager, reader: _Input, say: Say) -> None:
    task_id = _read_id(reader, say, "ID om te verwijderen: ")
    if manager.remove_task(task_id):
        say("Task verwijderd.\n")
    else:
        say("Task niet gevonden.\n")


def _mark_done(manager: TaskManager, reader: _Input, say: Say) -> None:
    task = manager.find_task(_read_id(reader, say, "ID om als done te markeren: "))
    if task is None:
        say("Task niet gevonden.\n")
        return
    task.done = True
    say("Task gemarkeerd als done.\n")


def _read_filename(reader: _Input, say: Say) -> str:
    say("Bestandsnaam (bv. tasks.txt): ")
    return reader.read_line() or DEFAULT_FILENAME


def _save(manager: TaskManager, reader: _Input, say: Say) -> None:
    manager.save_to_file(_read_filename(reader, say))
    say("Opgeslagen.\n")


def _load(manager: TaskManager, reader: _Input, say: Say) -> None:
    manager.load_from_file(_read_filename(reader, say))
    say("Geleden.\n")


_ACTIONS: dict[int, Callable[[TaskManager, _Input, Say], None]] = {
    1: _list,
    2: _add_simple,
    3: _add_timed,
    4: _remove,
    5: _mark_done,
    6: _save,
    7: _load,
}


def run(
    manager: TaskManager,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> None:
    """Show the menu and carry out choices until the user stops or input ends."""
    source = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout
    err = sys.stderr if stderr is None else stderr
    reader = _Input(source)

    def say(text: str) -> None:
        out.write(text)
        out.flush()

    while True:
        say(MENU)
        try:
            choice = reader.read_int()
        except EOFError:
            say("\nGeen invoer meer, programma stopt.\n")
            return
        except ValueError:
            say("Ongeldige input.\n")
            continue
        reader.discard_line()

        if choice == 0:
            return
        action = _ACTIONS.get(choice)
        if action is None:
            say("Onbekende keuze.\n")
            continue
        try:
            action(manager, reader, say)
        except EOFError:
            say("\nGeen invoer meer, programma stopt.\n")
            return
        except (ValueError, TypeError, OSError) as exc:
            err.write(f"Fout: {exc}\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive task manager on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="taskmgr", description="Interactive task manager."
    )
    parser.parse_args(argv)
    run(TaskManager())
    return 0