# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskbook.core.state import AppState
from taskbook.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the command handlers.

    A SimpleNamespace keeps tests independent of the process environment / .env.
    """
    return SimpleNamespace(
        app_name="taskbook-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
        sqlite_timeout=5.0,
        confirm_delete=True,
    )


@pytest.fixture()
def store(settings: SimpleNamespace):
    s = TaskStore(settings.tasks_db_path, timeout=settings.sqlite_timeout)
    s.initialize()
    yield s
    s.close()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    # Real SQLite store: its behavior is part of what the command tests check.
    return AppState(settings=settings, task_store=store)
