# src/taskbook/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (taskbook.config.Settings, or a SimpleNamespace in tests).
    settings: Any

    task_store: TaskRepo
