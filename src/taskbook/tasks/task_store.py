# src/taskbook/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import threading
from collections.abc import Iterator
from datetime import datetime, timezone
from pathlib import Path

from .errors import NotFound, StorageError, StorageUnavailable, ValidationError
from .task_models import Priority, Task, TaskPatch

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    text TEXT NOT NULL,
    done INTEGER NOT NULL DEFAULT 0,
    priority TEXT NOT NULL DEFAULT 'medium'
        CHECK (priority IN ('urgent', 'medium', 'low')),
    finished_at TEXT,
    created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now'))
)
"""


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TaskStore:
    """
    SQLite task store.

    Lifecycle:
    - constructing the object touches nothing on disk
    - initialize() opens the one connection this store owns and creates the schema;
      every public method calls it implicitly, repeated calls are no-ops
    - close() drops the connection (the composition root calls it on shutdown)

    Thread-safety:
    - the connection is opened with check_same_thread=False and every use is
      serialized by a lock, so AsyncTaskStore can drive it from worker threads
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3", *, timeout: float = 30.0) -> None:
        self._db_path = db_path if str(db_path) == ":memory:" else Path(db_path)
        self._timeout = float(timeout)
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    @property
    def db_path(self) -> str | Path:
        return self._db_path

    def initialize(self) -> None:
        with self._lock:
            self._ensure_open()

    def close(self) -> None:
        with self._lock:
            if self._conn is None:
                return
            self._conn.close()
            self._conn = None
            logger.debug("TaskStore closed db=%s", self._db_path)

    # ---- low-level helpers ----

    def _ensure_open(self) -> sqlite3.Connection:
        if self._conn is not None:
            return self._conn

        try:
            if isinstance(self._db_path, Path):
                self._db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self._db_path), timeout=self._timeout, check_same_thread=False)
        except (OSError, sqlite3.Error) as exc:
            raise StorageUnavailable(f"cannot open task database {self._db_path}: {exc}") from exc

        conn.row_factory = sqlite3.Row
        try:
            with conn:
                conn.execute(_SCHEMA)
        except sqlite3.Error as exc:
            conn.close()
            raise StorageUnavailable(f"cannot initialize task database {self._db_path}: {exc}") from exc

        self._conn = conn
        (total,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
        logger.info("TaskStore ready db=%s total=%s", self._db_path, total)
        return conn

    @contextlib.contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        """Serialized access; commits on success, rolls back and wraps sqlite errors."""
        with self._lock:
            conn = self._ensure_open()
            try:
                with conn:
                    yield conn
            except sqlite3.Error as exc:
                raise StorageError(str(exc)) from exc

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            text=str(row["text"]),
            done=bool(row["done"]),
            priority=Priority(row["priority"]),
            created_at=str(row["created_at"]),
            finished_at=row["finished_at"],
        )

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._transaction() as conn:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)

    def create(self, text: str, priority: Priority | str = Priority.MEDIUM) -> int:
        if not isinstance(text, str) or not text.strip():
            raise ValidationError("text is required")
        prio = Priority.parse(priority)

        with self._transaction() as conn:
            cur = conn.execute(
                "INSERT INTO tasks(text, done, priority, finished_at, created_at) VALUES (?, 0, ?, NULL, ?)",
                (text, prio.value, utc_now_iso()),
            )
            rowid = cur.lastrowid
            if rowid is None:
                raise StorageError("SQLite did not return lastrowid for tasks insert")
            task_id = int(rowid)

        logger.debug("Task created id=%s priority=%s", task_id, prio.value)
        return task_id

    def list_tasks(self) -> list[Task]:
        """
        All tasks, urgent -> medium -> low; newest first inside a tier.

        Re-reads the table on every call.
        """
        with self._transaction() as conn:
            rows = conn.execute(
                """
                SELECT *
                FROM tasks
                ORDER BY
                    CASE priority
                        WHEN 'urgent' THEN 1
                        WHEN 'medium' THEN 2
                        WHEN 'low' THEN 3
                    END,
                    id DESC
                """
            ).fetchall()
        return [self._row_to_task(r) for r in rows]

    def get_task(self, task_id: int) -> Task | None:
        with self._transaction() as conn:
            row = conn.execute("SELECT * FROM tasks WHERE id = ?", (int(task_id),)).fetchone()
        return self._row_to_task(row) if row else None

    def update(self, task_id: int, patch: TaskPatch) -> None:
        """
        Overwrite only the fields set on `patch`.

        Empty patch -> returns without touching the database.
        Raises NotFound when no row has this id.
        """
        items = patch.items()
        if not items:
            return

        assignments = ", ".join(f"{name} = ?" for name, _ in items)
        params = [value for _, value in items]
        params.append(int(task_id))

        with self._transaction() as conn:
            cur = conn.execute(f"UPDATE tasks SET {assignments} WHERE id = ?", params)
            matched = cur.rowcount

        if matched == 0:
            raise NotFound(int(task_id))
        logger.debug("Task updated id=%s fields=%s", task_id, [name for name, _ in items])

    def delete(self, task_id: int) -> bool:
        """Remove a task. Missing id is a no-op; returns whether a row was removed."""
        with self._transaction() as conn:
            cur = conn.execute("DELETE FROM tasks WHERE id = ?", (int(task_id),))
            removed = cur.rowcount > 0

        logger.debug("Task delete id=%s removed=%s", task_id, removed)
        return removed
