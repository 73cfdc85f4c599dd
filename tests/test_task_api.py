# tests/test_task_api.py

from __future__ import annotations

import pytest

from taskbook.tasks.errors import NotFound, ValidationError
from taskbook.tasks.task_api import add_task, edit_task, filter_tasks, toggle_done
from taskbook.tasks.task_models import Priority
from taskbook.tasks.task_store import TaskStore


def test_add_task_trims_text(store: TaskStore) -> None:
    task_id = add_task(store, "  Buy milk  ", "urgent")
    t = store.get_task(task_id)
    assert t is not None
    assert t.text == "Buy milk"


def test_toggle_pairs_done_with_finished_at(store: TaskStore) -> None:
    task_id = add_task(store, "Ship it", Priority.MEDIUM)
    task = store.get_task(task_id)
    assert task is not None

    patch = toggle_done(store, task, now_iso="2024-05-01T10:00:00.000Z")
    assert patch.done is True
    done = store.get_task(task_id)
    assert done is not None
    assert done.done is True
    assert done.finished_at == "2024-05-01T10:00:00.000Z"

    toggle_done(store, done)
    pending = store.get_task(task_id)
    assert pending is not None
    assert pending.done is False
    assert pending.finished_at is None
    assert pending.text == "Ship it"


def test_toggle_without_timestamp_uses_now(store: TaskStore) -> None:
    task = store.get_task(add_task(store, "x"))
    assert task is not None
    toggle_done(store, task)
    done = store.get_task(task.id)
    assert done is not None
    assert done.finished_at is not None
    assert done.finished_at.endswith("Z")


def test_edit_task(store: TaskStore) -> None:
    task_id = add_task(store, "draft", Priority.LOW)
    edit_task(store, task_id, text=" final ", priority="urgent")
    t = store.get_task(task_id)
    assert t is not None
    assert (t.text, t.priority) == ("final", Priority.URGENT)

    # Nothing to change -> no write, no error even for unknown ids.
    edit_task(store, 424242)

    with pytest.raises(NotFound):
        edit_task(store, 424242, text="nope")


def test_filter_tasks(store: TaskStore) -> None:
    a = add_task(store, "a")
    b = add_task(store, "b")
    task_b = store.get_task(b)
    assert task_b is not None
    toggle_done(store, task_b)

    tasks = store.list_tasks()
    assert {t.id for t in filter_tasks(tasks, "all")} == {a, b}
    assert [t.id for t in filter_tasks(tasks, "done")] == [b]
    assert [t.id for t in filter_tasks(tasks, "UNDONE")] == [a]
    with pytest.raises(ValidationError):
        filter_tasks(tasks, "later")
