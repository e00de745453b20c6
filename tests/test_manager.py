import io

import pytest

from taskmgr.manager import TaskManager
from taskmgr.task import SimpleTask, TimedTask


@pytest.fixture
def manager():
    mgr = TaskManager()
    mgr.add_task(SimpleTask("Buy", "milk", 3))
    timed = TimedTask("Report", "write", 7, "2025-12-31 23:59")
    timed.done = True
    mgr.add_task(timed)
    return mgr


def test_add_and_iterate(manager):
    assert len(manager) == 2
    assert [t.title for t in manager] == ["Buy", "Report"]


def test_add_none_raises():
    with pytest.raises(ValueError):
        TaskManager().add_task(None)


def test_add_non_task_raises():
    with pytest.raises(TypeError):
        TaskManager().add_task("task")


def test_find_task(manager):
    first = next(iter(manager))
    assert manager.find_task(first.id) is first
    assert manager.find_task(-1) is None


def test_remove_task(manager):
    first = next(iter(manager))
    assert manager.remove_task(first.id) is True
    assert len(manager) == 1
    assert manager.find_task(first.id) is None
    assert manager.remove_task(first.id) is False


def test_list_tasks(manager):
    out = io.StringIO()
    manager.list_tasks(file=out)
    assert out.getvalue().splitlines() == [str(t) for t in manager]


def test_list_tasks_hides_done(manager):
    out = io.StringIO()
    manager.list_tasks(show_done=False, file=out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 1
    assert "Buy - milk" in lines[0]


def test_save_format(manager, tmp_path):
    path = tmp_path / "tasks.txt"
    manager.save_to_file(str(path))
    assert path.read_text(encoding="utf-8") == (
        "S;3;0;Buy;milk\nT;7;1;Report;write;2025-12-31 23:59\n"
    )


def test_round_trip(manager, tmp_path):
    path = tmp_path / "tasks.txt"
    manager.save_to_file(str(path))
    loaded = TaskManager()
    loaded.load_from_file(str(path))
    original = [(type(t), t.title, t.description, t.priority, t.done) for t in manager]
    restored = [(type(t), t.title, t.description, t.priority, t.done) for t in loaded]
    assert restored == original
    assert [t.due_date for t in loaded if isinstance(t, TimedTask)] == [
        "2025-12-31 23:59"
    ]


def test_loaded_tasks_get_new_ids(manager, tmp_path):
    path = tmp_path / "tasks.txt"
    manager.save_to_file(str(path))
    old_ids = {t.id for t in manager}
    manager.load_from_file(str(path))
    assert len(manager) == 2
    assert not old_ids & {t.id for t in manager}


def test_load_missing_file_keeps_tasks(manager, tmp_path):
    manager.load_from_file(str(tmp_path / "absent.txt"))
    assert [t.title for t in manager] == ["Buy", "Report"]


def test_load_skips_blank_and_unknown_lines(tmp_path):
    path = tmp_path / "tasks.txt"
    path.write_text("\nX;1;0;a;b\n   \nS;4;1;Title;Desc\n", encoding="utf-8")
    mgr = TaskManager()
    mgr.load_from_file(str(path))
    tasks = list(mgr)
    assert len(tasks) == 1
    assert (tasks[0].title, tasks[0].description, tasks[0].priority, tasks[0].done) == (
        "Title",
        "Desc",
        4,
        True,
    )


def test_simple_description_keeps_semicolons(tmp_path):
    path = tmp_path / "tasks.txt"
    path.write_text("S;2;0;Title;one;two\n", encoding="utf-8")
    mgr = TaskManager()
    mgr.load_from_file(str(path))
    assert next(iter(mgr)).description == "one;two"


def test_load_bad_priority_raises(tmp_path):
    path = tmp_path / "tasks.txt"
    path.write_text("S;abc;0;Title;Desc\n", encoding="utf-8")
    with pytest.raises(ValueError):
        TaskManager().load_from_file(str(path))


def test_save_to_unwritable_path_raises(manager, tmp_path):
    with pytest.raises(OSError, match="Could not open file for writing"):
        manager.save_to_file(str(tmp_path))