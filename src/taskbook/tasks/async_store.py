# src/taskbook/tasks/async_store.py

from __future__ import annotations

"""
Asyncio face of TaskStore.

Every call hands the blocking SQLite work to a worker thread and suspends the
caller until it finishes. Calls are queued behind one asyncio.Lock, so a caller
that awaits update() and then list_tasks() always sees its own write.

There is no cancellation: cancelling the awaiting coroutine does not stop the
worker thread, the operation still completes and its result is dropped.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from .task_models import Priority, Task, TaskPatch
from .task_store import TaskStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncTaskStore:
    def __init__(self, store: TaskStore) -> None:
        self._store = store
        self._lock = asyncio.Lock()

    @property
    def store(self) -> TaskStore:
        return self._store

    async def _run(self, fn: Callable[..., T], *args: Any) -> T:
        async with self._lock:
            return await asyncio.to_thread(fn, *args)

    async def initialize(self) -> None:
        await self._run(self._store.initialize)

    async def create(self, text: str, priority: Priority | str = Priority.MEDIUM) -> int:
        return await self._run(self._store.create, text, priority)

    async def list_tasks(self) -> list[Task]:
        return await self._run(self._store.list_tasks)

    async def get_task(self, task_id: int) -> Task | None:
        return await self._run(self._store.get_task, task_id)

    async def update(self, task_id: int, patch: TaskPatch) -> None:
        if patch.is_empty():
            return
        await self._run(self._store.update, task_id, patch)

    async def delete(self, task_id: int) -> bool:
        return await self._run(self._store.delete, task_id)

    async def count_tasks(self) -> int:
        return await self._run(self._store.count_tasks)

    async def close(self) -> None:
        await self._run(self._store.close)
