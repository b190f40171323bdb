# src/todo_cli/tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from .errors import InvalidDescriptionError, PersistError, TaskNotFoundError
from .persistence import load_tasks, save_tasks
from .task_models import Task, TaskStatus, is_blank_description

logger = logging.getLogger(__name__)

DEFAULT_MAX_DESCRIPTION_LENGTH = 100


def validate_description(
    description: str, max_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH
) -> None:
    """
    Raise InvalidDescriptionError unless `description` is acceptable.

    Emptiness is checked on the trimmed text; length on the text as given.
    """
    if is_blank_description(description):
        raise InvalidDescriptionError("Error: Description cannot be empty or whitespace.")
    if len(description) > max_length:
        raise InvalidDescriptionError(
            f"Error: Description too long (max {max_length} characters)."
        )


class TaskStore:
    """
    Ordered, position-indexed task list.

    Position is the only identity a task has: removing index i shifts every
    later task down by one.

    Persistence:
    - with `path` set, every successful add/remove rewrites the whole file
    - a failed save raises PersistError, but the in-memory change stays
    """

    def __init__(
        self,
        tasks: list[Task] | None = None,
        *,
        path: str | Path | None = None,
        max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH,
    ) -> None:
        self._tasks: list[Task] = [replace(t) for t in tasks or []]
        self._path = Path(path) if path is not None else None
        self._max_description_length = max(1, int(max_description_length))

    @classmethod
    def load(
        cls,
        path: str | Path,
        *,
        max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH,
    ) -> TaskStore:
        """Hydrate a persisted store from `path` (empty if the file does not exist)."""
        store = cls(
            load_tasks(path),
            path=path,
            max_description_length=max_description_length,
        )
        logger.info("TaskStore ready path=%s total=%d", store.path, len(store))
        return store

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def max_description_length(self) -> int:
        return self._max_description_length

    def __len__(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    # ---- mutations ----

    def add(self, description: str, status: TaskStatus = TaskStatus.PENDING) -> Task:
        validate_description(description, self._max_description_length)

        task = Task(description=description, status=status)
        self._tasks.append(task)
        logger.debug("Task added index=%d status=%s", len(self._tasks) - 1, status.value)

        self._save_after(task)
        return replace(task)

    def remove(self, index: int) -> Task:
        if not 0 <= index < len(self._tasks):
            raise TaskNotFoundError(index)

        task = self._tasks.pop(index)
        logger.debug("Task removed index=%d remaining=%d", index, len(self._tasks))

        self._save_after(task)
        return task

    def save(self) -> None:
        """Write the current sequence to disk. No-op for an in-memory store."""
        if self._path is None:
            return
        try:
            save_tasks(self._path, self._tasks)
        except PersistError:
            logger.error("Save failed; in-memory tasks now differ from %s", self._path)
            raise

    def _save_after(self, task: Task) -> None:
        try:
            self.save()
        except PersistError as exc:
            exc.task = replace(task)
            raise

    # ---- queries ----

    def list_tasks(self) -> list[tuple[int, Task]]:
        return [(i, replace(t)) for i, t in enumerate(self._tasks)]
