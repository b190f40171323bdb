# src/todo_cli/tasks/errors.py

"""
Error taxonomy for the task list.

Every error carries a user-facing message (str(exc)), so the command layer
can report it without knowing the concrete type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .task_models import Task


class TodoError(Exception):
    """Base class for all task list errors."""


class NotEnoughArgsError(TodoError):
    def __init__(self, usage: str) -> None:
        super().__init__(f"Usage: {usage}")
        self.usage = usage


class InvalidDescriptionError(TodoError):
    pass


class InvalidStatusError(TodoError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid status: {token}. Use 'pending' or 'done'")
        self.token = token


class InvalidIndexError(TodoError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid value {token}. Must be a number")
        self.token = token


class TaskNotFoundError(TodoError):
    def __init__(self, index: int) -> None:
        super().__init__(f"Invalid index: {index}")
        self.index = index


class PersistError(TodoError):
    """
    I/O or (de)serialization failure while loading or saving tasks.

    When raised by a save that follows a mutation, `task` is the task that
    was added or removed in memory before the write failed.
    """

    def __init__(self, message: str, *, task: Task | None = None) -> None:
        super().__init__(message)
        self.task = task
