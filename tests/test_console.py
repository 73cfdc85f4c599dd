# tests/test_console.py

from __future__ import annotations

from collections.abc import Iterator

import pytest

from taskbook.cli.bootstrap import create_initial_state, shutdown_state
from taskbook.connectors.console_connector import run_console_loop
from taskbook.tasks.errors import StorageUnavailable


def _scripted(lines: list[str]):
    it: Iterator[str] = iter(lines)

    def read_line(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


def test_console_session(state, capsys: pytest.CaptureFixture[str]) -> None:
    run_console_loop(
        state,
        read_line=_scripted(["buy bread", "/add urgent call mom", "", "/list", "/exit", "/add never"]),
    )
    out = capsys.readouterr().out

    assert [t.text for t in state.task_store.list_tasks()] == ["call mom", "buy bread"]
    assert "Added task #1" in out
    assert out.index("call mom") < out.rindex("buy bread")


def test_console_stops_on_eof(state) -> None:
    run_console_loop(state, read_line=_scripted(["/add one"]))
    assert state.task_store.count_tasks() == 1


def test_bootstrap_opens_and_closes_store(settings) -> None:
    settings.data_dir = settings.data_dir / "data"
    settings.tasks_db_path = settings.data_dir / "tasks.sqlite3"

    st = create_initial_state(settings=settings)
    assert settings.tasks_db_path.exists()
    st.task_store.create("x")
    shutdown_state(st)


def test_bootstrap_reports_unavailable_storage(settings) -> None:
    settings.tasks_db_path = settings.data_dir
    with pytest.raises(StorageUnavailable):
        create_initial_state(settings=settings)
