# tests/test_async_store.py

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from taskbook.tasks.async_store import AsyncTaskStore
from taskbook.tasks.errors import NotFound
from taskbook.tasks.task_models import Priority, TaskPatch
from taskbook.tasks.task_store import TaskStore


@pytest.mark.asyncio
async def test_async_crud_scenario(tmp_path: Path) -> None:
    store = AsyncTaskStore(TaskStore(tmp_path / "tasks.sqlite3"))
    await store.initialize()
    await store.initialize()

    a = await store.create("A", Priority.LOW)
    b = await store.create("B", Priority.URGENT)
    c = await store.create("C", Priority.MEDIUM)
    assert [t.id for t in await store.list_tasks()] == [b, c, a]

    await store.update(b, TaskPatch(done=True, finished_at="2024-01-01T00:00:00Z"))
    tasks = {t.id: t for t in await store.list_tasks()}
    assert tasks[b].done is True
    assert tasks[b].finished_at == "2024-01-01T00:00:00Z"
    assert tasks[b].text == "B"

    assert await store.delete(a) is True
    assert await store.delete(a) is False
    assert [t.id for t in await store.list_tasks()] == [b, c]

    with pytest.raises(NotFound):
        await store.update(a, TaskPatch(text="gone"))

    await store.close()


@pytest.mark.asyncio
async def test_concurrent_calls_are_applied_in_issue_order(tmp_path: Path) -> None:
    store = AsyncTaskStore(TaskStore(tmp_path / "tasks.sqlite3"))
    task_id = await store.create("counter", Priority.MEDIUM)

    await asyncio.gather(
        store.update(task_id, TaskPatch(text="first")),
        store.update(task_id, TaskPatch(text="second")),
        store.update(task_id, TaskPatch(text="third")),
    )
    task = await store.get_task(task_id)
    assert task is not None
    assert task.text == "third"
    assert await store.count_tasks() == 1

    await store.close()
