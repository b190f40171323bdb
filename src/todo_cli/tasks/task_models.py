# src/todo_cli/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskStatus(StrEnum):
    """Binary task status."""

    PENDING = "pending"
    DONE = "done"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, raw: str) -> TaskStatus | None:
        """Case-insensitive lookup; None for anything that is not a known status."""
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


@dataclass(slots=True)
class Task:
    description: str
    status: TaskStatus = TaskStatus.PENDING

    def __str__(self) -> str:
        return f"{self.description} ({self.status.display_name})"


# Quoting artifacts left over when a user types add "" pending.
EMPTY_QUOTE_MARKERS = frozenset({'""', "''"})


def is_blank_description(description: str) -> bool:
    trimmed = description.strip()
    return not trimmed or trimmed in EMPTY_QUOTE_MARKERS
