# src/todo_cli/tasks/persistence.py

"""
JSON persistence for the task list.

The file is a single JSON array:
    [{"description": "Buy milk", "status": "pending"}, ...]

Reads and writes always cover the whole document. Writes go to a sibling
temp file first and are moved into place with os.replace, so readers never
observe a half-written file.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .errors import PersistError
from .task_models import Task, TaskStatus, is_blank_description

logger = logging.getLogger(__name__)


def _task_to_dict(task: Task) -> dict[str, str]:
    return {"description": task.description, "status": task.status.value}


def _dict_to_task(raw: Any, position: int) -> Task:
    if not isinstance(raw, dict):
        raise PersistError(f"Task #{position} is not a JSON object")

    description = raw.get("description")
    if not isinstance(description, str):
        raise PersistError(f"Task #{position} has no string 'description'")
    if is_blank_description(description):
        raise PersistError(f"Task #{position} has an empty description")

    status_raw = raw.get("status")
    status = TaskStatus.parse(status_raw) if isinstance(status_raw, str) else None
    if status is None:
        raise PersistError(f"Task #{position} has unknown status {status_raw!r}")

    return Task(description=description, status=status)


def load_tasks(path: str | Path) -> list[Task]:
    """
    Read the task sequence from `path`.

    A missing file is not an error: it yields an empty list.
    Anything else that goes wrong raises PersistError.
    """
    path = Path(path)
    try:
        raw = path.read_text("utf-8")
    except FileNotFoundError:
        logger.info("No task file at %s, starting empty", path)
        return []
    except (OSError, UnicodeDecodeError) as exc:
        raise PersistError(f"Failed to read tasks from {path}: {exc}") from exc

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise PersistError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, list):
        raise PersistError(f"Expected a JSON array in {path}, got {type(data).__name__}")

    tasks = [_dict_to_task(item, i) for i, item in enumerate(data)]
    logger.info("Loaded %d tasks from %s", len(tasks), path)
    return tasks


def save_tasks(path: str | Path, tasks: Iterable[Task]) -> None:
    """Overwrite `path` with the full task sequence."""
    path = Path(path)
    payload = [_task_to_dict(t) for t in tasks]
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, path)
    except OSError as exc:
        with contextlib.suppress(OSError):
            tmp.unlink(missing_ok=True)
        raise PersistError(f"Failed to save tasks to {path}: {exc}") from exc
    logger.debug("Saved %d tasks to %s", len(payload), path)
