# src/taskbook/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the front end.

Helpers and command handlers depend on this Protocol instead of TaskStore itself,
so tests and alternative backends can plug in their own repo.
"""

from typing import Any, Protocol


class TaskRepo(Protocol):
    def initialize(self) -> None: ...
    def create(self, text: str, priority: Any = ...) -> int: ...
    def list_tasks(self) -> list[Any]: ...
    def get_task(self, task_id: int) -> Any | None: ...
    def update(self, task_id: int, patch: Any) -> None: ...
    def delete(self, task_id: int) -> bool: ...
    def count_tasks(self) -> int: ...
    def close(self) -> None: ...
