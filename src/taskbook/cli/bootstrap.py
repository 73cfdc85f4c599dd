# src/taskbook/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- constructs the TaskStore and wires it into AppState.

The store object is owned here; consumers get it through AppState rather than
through a module-level handle.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings and open the task database.

    If settings is None, falls back to get_settings().
    Raises StorageUnavailable when the database cannot be opened.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(
        settings.tasks_db_path,
        timeout=float(getattr(settings, "sqlite_timeout", 30.0)),
    )
    store.initialize()

    return AppState(settings=settings, task_store=store)


def shutdown_state(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        state.task_store.close()
    except Exception:
        logger.exception("TaskStore close failed.")
