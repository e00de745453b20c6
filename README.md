# taskmgr

A small task manager. It keeps an ordered list of tasks. Each task has a title,
a description, a priority and a done flag. There are two kinds of task:

- `SimpleTask`: a task with no deadline.
- `TimedTask`: a task that also has a `due_date`. The due date is free text,
  for example `2025-12-31 23:59`.

Each task gets a unique id when it is created. Ids start at 1 and go up by one.
`task.copy()` returns a copy with the same fields and a new id. `task.type()`
returns a `TaskType`, which is either `SIMPLE` or `TIMED`.

## Installation

```
pip install .
```

To also install the test requirements:

```
pip install .[test]
```

## Console

```
taskmgr
```

This command starts an interactive menu on standard input and output. The only
option it accepts is `--help`. The menu text is in Dutch:

```
=== Task Manager ===
1. Toon alle taken
2. Voeg simple task toe
3. Voeg timed task toe
4. Verwijder task
5. Markeer task als done
6. Save naar bestand
7. Load uit bestand
0. Stop
```

In order, the options:

1. List every task.
2. Add a simple task.
3. Add a timed task.
4. Remove a task by id.
5. Mark a task as done.
6. Save the task list to a file.
7. Load the task list from a file.
0. Quit.

Details of the menu:

- When you save or load and leave the file name empty, `tasks.txt` is used.
- Input that is not a number at the menu prompt is reported and the menu is shown again.
- A bad number or a file error inside an option is written to standard error as `Fout: ...`.
- The menu stops when input runs out.

You can also drive the menu from code with `taskmgr.console.run(manager, stdin, stdout, stderr)`:

- It takes any text streams.
- Each stream defaults to the matching `sys` stream.

## Library use

```python
from taskmgr.task import SimpleTask, TimedTask
from taskmgr.manager import TaskManager

manager = TaskManager()
manager.add_task(SimpleTask("Boodschappen", "melk en brood", 3))
deadline = TimedTask("Rapport", "eindversie", 8, "2025-12-31 23:59")
manager.add_task(deadline)

deadline.done = True
manager.list_tasks()                   # prints every task to stdout
manager.list_tasks(show_done=False)    # leaves out finished tasks

manager.save_to_file("tasks.txt")
manager.load_from_file("tasks.txt")    # replaces the current tasks

for task in manager:
    print(task.id, task.type(), task)
print(len(manager))
```

`TaskManager`:

- `list_tasks` also accepts a `file` argument to print somewhere other than stdout.
- `add_task` raises `ValueError` for `None` and `TypeError` for anything that is not a `Task`.
- `remove_task(task_id)` returns whether a task was removed.
- `find_task(task_id)` returns the task or `None`.

Priority:

- Setting `task.priority` to a value above 10 stores 10.
- A priority given to a constructor is not capped. It is only reduced to the range 0–255.

## File format

There is one task per line, with fields separated by `;`:

```
S;prio;done;title;description
T;prio;done;title;description;due_date
```

On saving, `done` is written as `1` or `0`.

When loading:

- A task is marked done only when its `done` field is `1`.
- Empty lines are skipped.
- Lines of an unknown kind are skipped.
- A priority field that does not start with a number raises `ValueError`.
- A file that cannot be opened leaves the current tasks as they are.
- A file that can be opened replaces the current tasks.

Fields are not escaped. A title or description that contains `;` does not come
back the same after a save and load.

If saving cannot open the file, `save_to_file` raises `OSError`.

## What it does not do

The package has no graphical interface. The console menu is the only front
end. Tasks are kept only in memory until you save them to a file.