# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_cli.core.state import AppState
from todo_cli.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "tasks.json",
        persist_enabled=True,
        max_description_length=20,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    """Persisted store writing into tmp_path."""
    return TaskStore(
        path=settings.tasks_path,
        max_description_length=settings.max_description_length,
    )


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)
