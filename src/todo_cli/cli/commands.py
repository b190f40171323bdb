# src/todo_cli/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.errors import (
    InvalidIndexError,
    InvalidStatusError,
    NotEnoughArgsError,
    PersistError,
    TodoError,
)
from ..tasks.task_models import Task, TaskStatus
from ..tasks.task_store import validate_description

# Handlers receive the full token list, command name at position 0.
CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

ADD_USAGE = "add <description> <status>"
REMOVE_USAGE = "remove <index>"
NO_TASKS = "No tasks."


class CommandRegistry:
    """Command registry used by the console connector (add, remove, list, help)."""

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

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Tokenize `line` on whitespace and run the matching command.
        Returns a reply string, or None for a blank line.
        """
        args = line.split()
        if not args:
            return None

        name = args[0].lower()
        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: {args[0]}. Type 'help' for commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Commands:"]
        for help_text in self._help.values():
            lines.append(f"  {help_text}")
        return "\n".join(lines)


# ---- parsing ----


def parse_status(token: str) -> TaskStatus:
    status = TaskStatus.parse(token)
    if status is None:
        raise InvalidStatusError(token)
    return status


def parse_index(token: str) -> int:
    # Only plain ASCII digits: no sign, no unicode digits.
    if not (token.isascii() and token.isdigit()):
        raise InvalidIndexError(token)
    return int(token)


# ---- store operations ----


def handle_add_command(store: TaskRepo, args: list[str]) -> Task:
    """
    add <word>... <status>

    The description is every token between the command and the status,
    joined with single spaces.
    """
    if len(args) < 3:
        raise NotEnoughArgsError(ADD_USAGE)

    description = " ".join(args[1:-1])
    validate_description(description, store.max_description_length)
    status = parse_status(args[-1])

    return store.add(description, status)


def handle_remove_command(store: TaskRepo, args: list[str]) -> Task:
    if len(args) != 2:
        raise NotEnoughArgsError(REMOVE_USAGE)

    index = parse_index(args[1])
    return store.remove(index)


def render_task_list(store: TaskRepo) -> str:
    entries = store.list_tasks()
    if not entries:
        return NO_TASKS
    return "\n".join(f"{i}: {task}" for i, task in entries)


# ---- registry commands ----


def _with_save_warning(done: str, exc: PersistError) -> str:
    return f"{done}\nWarning: {exc}. The change is kept in memory only."


def cmd_add(state: AppState, args: list[str]) -> str:
    try:
        task = handle_add_command(state.task_store, args)
    except PersistError as e:
        logger.warning("Add kept in memory, save failed: %s", e)
        return _with_save_warning(f"Added: {e.task}", e)
    except TodoError as e:
        return str(e)
    return f"Added: {task}"


def cmd_remove(state: AppState, args: list[str]) -> str:
    try:
        task = handle_remove_command(state.task_store, args)
    except PersistError as e:
        logger.warning("Remove kept in memory, save failed: %s", e)
        return _with_save_warning(f"Removed: {e.task}", e)
    except TodoError as e:
        return str(e)
    return f"Removed: {task}"


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_task_list(state.task_store)


def cmd_help(state: AppState, args: list[str]) -> str:
    return (
        registry.build_help()
        + "\n  quit or q - Exit the program"
        + "\nExample: add Buy milk and eggs pending"
    )


registry = CommandRegistry()

registry.register(
    "add", cmd_add, help_text="add <description> <status> - Add a task (status: pending, done)"
)
registry.register(
    "remove", cmd_remove, help_text="remove <index> - Remove a task by index", aliases=["rm"]
)
registry.register("list", cmd_list, help_text="list - List all tasks", aliases=["ls"])
registry.register("help", cmd_help, help_text="help - Show this help")
