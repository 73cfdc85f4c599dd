# src/taskbook/tasks/task_api.py

from __future__ import annotations

import logging
from typing import Literal

from ..core.ports import TaskRepo
from .errors import ValidationError
from .task_models import Priority, Task, TaskPatch
from .task_store import utc_now_iso

logger = logging.getLogger(__name__)

TaskFilter = Literal["all", "done", "undone"]
FILTERS: tuple[str, ...] = ("all", "done", "undone")


def add_task(store: TaskRepo, text: str, priority: Priority | str = Priority.MEDIUM) -> int:
    """Trim user input and create the task."""
    return store.create(text.strip(), priority)


def toggle_done(store: TaskRepo, task: Task, *, now_iso: str | None = None) -> TaskPatch:
    """
    Flip completion of `task` in one update.

    done and finished_at always travel together:
      pending   -> done=True,  finished_at=now
      completed -> done=False, finished_at=None
    Returns the patch that was applied.
    """
    if task.done:
        patch = TaskPatch(done=False, finished_at=None)
    else:
        patch = TaskPatch(done=True, finished_at=now_iso or utc_now_iso())
    store.update(task.id, patch)
    logger.info("Task %s -> %s", task.id, "done" if patch.done else "pending")
    return patch


def edit_task(
    store: TaskRepo,
    task_id: int,
    *,
    text: str | None = None,
    priority: Priority | str | None = None,
) -> None:
    kwargs: dict[str, object] = {}
    if text is not None:
        kwargs["text"] = text.strip()
    if priority is not None:
        kwargs["priority"] = priority
    store.update(task_id, TaskPatch.from_mapping(kwargs))


def filter_tasks(tasks: list[Task], which: str = "all") -> list[Task]:
    key = (which or "all").strip().lower()
    if key not in FILTERS:
        raise ValidationError(f"unknown filter {which!r} (expected one of: {', '.join(FILTERS)})")
    if key == "done":
        return [t for t in tasks if t.done]
    if key == "undone":
        return [t for t in tasks if not t.done]
    return list(tasks)
