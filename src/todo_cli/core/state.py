# src/todo_cli/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings travel with the state so handlers never read global config.
    settings: object

    # The only owner of the task list; handed explicitly to every command.
    task_store: TaskRepo
