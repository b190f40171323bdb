# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the task store (hydrated from disk when persistence is on),
- wires both into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_task_store(settings) -> TaskStore:
    """
    Build the store described by `settings`.

    Raises PersistError when the task file exists but cannot be read;
    the app must not start on top of state it could not load.
    """
    max_len = settings.max_description_length
    if not settings.persist_enabled:
        logger.info("Persistence disabled; tasks live in memory only.")
        return TaskStore(max_description_length=max_len)
    return TaskStore.load(settings.tasks_path, max_description_length=max_len)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    return AppState(settings=settings, task_store=create_task_store(settings))
