# src/taskbook/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.errors import NotFound, ValidationError
from ..tasks.task_api import FILTERS, add_task, edit_task, filter_tasks, toggle_done
from ..tasks.task_models import Priority, Task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except NotFound as e:
            return f"Task {e.task_id} not found."
        except ValidationError as e:
            return f"Invalid input: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0].lstrip("#"))
    except ValueError:
        return None


def format_task(task: Task) -> str:
    status = "DONE" if task.done else "UNDONE"
    finished = task.finished_at or "-"
    return f"#{task.id:<4} {task.priority.value.upper():<6} {status:<6} {finished:<24} {task.text}"


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add buy milk          -> medium priority
    /add urgent buy milk   -> first word picks the priority when it is one
    """
    priority = Priority.MEDIUM
    if args and args[0].lower() in {p.value for p in Priority}:
        priority = Priority.parse(args[0])
        args = args[1:]

    text = " ".join(args).strip()
    if not text:
        return "Usage: /add [urgent|medium|low] <text>"

    task_id = add_task(state.task_store, text, priority)
    return f"Added task #{task_id} ({priority.value})."


def cmd_list(state: AppState, args: list[str]) -> str:
    which = args[0] if args else "all"
    tasks = filter_tasks(state.task_store.list_tasks(), which)
    if not tasks:
        return "No tasks yet." if which == "all" else f"No {which.lower()} tasks."

    lines = [f"{'ID':<5} {'PRIO':<6} {'STATUS':<6} {'FINISHED AT':<24} TASK"]
    lines.extend(format_task(t) for t in tasks)
    return "\n".join(lines)


def cmd_done(state: AppState, args: list[str]) -> str:
    """/done <id> toggles between done and undone."""
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"

    task = state.task_store.get_task(task_id)
    if task is None:
        raise NotFound(task_id)

    patch = toggle_done(state.task_store, task)
    return f"Task #{task_id} marked {'done' if patch.done else 'undone'}."


def cmd_edit(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    text = " ".join(args[1:]).strip()
    if task_id is None or not text:
        return "Usage: /edit <id> <new text>"

    edit_task(state.task_store, task_id, text=text)
    return f"Task #{task_id} updated."


def cmd_prio(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None or len(args) < 2:
        return "Usage: /prio <id> <urgent|medium|low>"

    edit_task(state.task_store, task_id, priority=args[1])
    return f"Task #{task_id} priority set to {Priority.parse(args[1]).value}."


def cmd_del(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /del <id>      -> asks for confirmation (unless confirm_delete is off)
    /del <id> yes  -> deletes
    """
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /del <id> [yes]"

    confirmed = len(args) > 1 and args[1].lower() in ("yes", "y")
    if getattr(state.settings, "confirm_delete", True) and not confirmed:
        task = state.task_store.get_task(task_id)
        if task is None:
            return f"Task #{task_id} does not exist, nothing to delete."
        return f"Delete task #{task_id} ({task.text!r})? Are you sure? Repeat with: /del {task_id} yes"

    if emit:
        emit(f"Deleting task #{task_id}...")
    removed = state.task_store.delete(task_id)
    logger.debug("Delete requested id=%s removed=%s", task_id, removed)
    return f"Task #{task_id} deleted." if removed else f"Task #{task_id} does not exist, nothing to delete."


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    return (
        "Status:\n"
        f"  Database: {getattr(settings, 'tasks_db_path', '?')}\n"
        f"  Tasks: {state.task_store.count_tasks()}\n"
        f"  Delete confirmation: {'ON' if getattr(settings, 'confirm_delete', True) else 'OFF'}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add [urgent|medium|low] <text>.", aliases=["a"])
registry.register(
    "list", cmd_list, help_text=f"List tasks: /list [{'|'.join(FILTERS)}].", aliases=["ls", "l"]
)
registry.register("done", cmd_done, help_text="Toggle done/undone: /done <id>.", aliases=["toggle"])
registry.register("edit", cmd_edit, help_text="Change task text: /edit <id> <text>.")
registry.register("prio", cmd_prio, help_text="Change priority: /prio <id> <urgent|medium|low>.")
registry.register("del", cmd_del, help_text="Delete a task: /del <id> [yes].", aliases=["rm"])
registry.register("status", cmd_status, help_text="Show database path and task count.")
