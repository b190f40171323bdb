# src/todo_cli/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Command handlers depend on this Protocol instead of the concrete TaskStore,
so tests can hand in any object with the same surface.
"""

from typing import Protocol

from ..tasks.task_models import Task, TaskStatus


class TaskRepo(Protocol):
    @property
    def max_description_length(self) -> int: ...

    def __len__(self) -> int: ...

    def add(self, description: str, status: TaskStatus = ...) -> Task: ...

    def remove(self, index: int) -> Task: ...

    def list_tasks(self) -> list[tuple[int, Task]]: ...
