"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskPatch, Priority)
- errors.py: exception hierarchy (StorageUnavailable, ValidationError, NotFound)
- task_store.py: SQLite-backed storage (initialize / create / list / update / delete)
- async_store.py: asyncio wrapper that runs store calls in a worker thread
- task_api.py: caller-side helpers (toggle done, edit, filter)
"""

from .async_store import AsyncTaskStore
from .errors import NotFound, StorageError, StorageUnavailable, TaskStoreError, ValidationError
from .task_models import Priority, Task, TaskPatch
from .task_store import TaskStore

__all__ = [
    "AsyncTaskStore",
    "NotFound",
    "Priority",
    "StorageError",
    "StorageUnavailable",
    "Task",
    "TaskPatch",
    "TaskStore",
    "TaskStoreError",
    "ValidationError",
]
