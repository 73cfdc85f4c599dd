# src/taskbook/tasks/errors.py

from __future__ import annotations


class TaskStoreError(Exception):
    """Base class for everything the task subsystem raises."""


class StorageError(TaskStoreError):
    """A SQLite operation failed; the original sqlite3 error is kept as __cause__."""


class StorageUnavailable(StorageError):
    """The database file could not be opened or created."""


class ValidationError(TaskStoreError, ValueError):
    pass


class NotFound(TaskStoreError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"task {task_id} does not exist")
        self.task_id = task_id
