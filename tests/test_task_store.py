# tests/test_task_store.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from todo_cli.tasks.errors import InvalidDescriptionError, PersistError, TaskNotFoundError
from todo_cli.tasks.task_models import Task, TaskStatus
from todo_cli.tasks.task_store import TaskStore


def _descriptions(store: TaskStore) -> list[str]:
    return [t.description for _, t in store.list_tasks()]


def test_new_store_is_empty() -> None:
    store = TaskStore()
    assert len(store) == 0
    assert store.is_empty()
    assert store.list_tasks() == []
    assert store.path is None


def test_add_appends_at_next_index() -> None:
    store = TaskStore()
    store.add("Buy milk", TaskStatus.PENDING)
    added = store.add("Walk dog", TaskStatus.DONE)

    assert added == Task("Walk dog", TaskStatus.DONE)
    assert store.list_tasks() == [
        (0, Task("Buy milk", TaskStatus.PENDING)),
        (1, Task("Walk dog", TaskStatus.DONE)),
    ]


def test_remove_shifts_later_tasks_down() -> None:
    store = TaskStore([Task("a"), Task("b"), Task("c"), Task("d")])

    removed = store.remove(1)

    assert removed.description == "b"
    assert len(store) == 3
    assert store.list_tasks()[1] == (1, Task("c"))
    assert _descriptions(store) == ["a", "c", "d"]


@pytest.mark.parametrize("index", [1, 5, 100])
def test_remove_out_of_range_leaves_store_unchanged(index: int) -> None:
    store = TaskStore([Task("only")])
    before = store.list_tasks()

    with pytest.raises(TaskNotFoundError) as exc_info:
        store.remove(index)

    assert exc_info.value.index == index
    assert store.list_tasks() == before


def test_remove_on_empty_store_fails() -> None:
    with pytest.raises(TaskNotFoundError):
        TaskStore().remove(0)


def test_remove_negative_index_is_not_found() -> None:
    store = TaskStore([Task("a"), Task("b")])
    with pytest.raises(TaskNotFoundError):
        store.remove(-1)
    assert len(store) == 2


@pytest.mark.parametrize("description", ["", "   ", '""', "''", ' "" '])
def test_add_rejects_empty_descriptions(description: str) -> None:
    store = TaskStore()
    with pytest.raises(InvalidDescriptionError):
        store.add(description, TaskStatus.PENDING)
    assert len(store) == 0


def test_add_length_boundary() -> None:
    store = TaskStore(max_description_length=20)

    store.add("x" * 20, TaskStatus.PENDING)
    with pytest.raises(InvalidDescriptionError, match="max 20"):
        store.add("x" * 21, TaskStatus.PENDING)

    assert len(store) == 1


def test_length_counts_characters_not_bytes() -> None:
    store = TaskStore(max_description_length=20)

    store.add("é" * 20, TaskStatus.PENDING)
    with pytest.raises(InvalidDescriptionError):
        store.add("é" * 21, TaskStatus.PENDING)

    assert store.list_tasks() == [(0, Task("é" * 20, TaskStatus.PENDING))]


def test_callers_get_copies_not_aliases() -> None:
    store = TaskStore()
    added = store.add("Buy milk", TaskStatus.PENDING)
    added.description = "changed"

    _, listed = store.list_tasks()[0]
    listed.status = TaskStatus.DONE

    assert store.list_tasks() == [(0, Task("Buy milk", TaskStatus.PENDING))]


def test_constructor_copies_initial_tasks() -> None:
    seed = [Task("a")]
    store = TaskStore(seed)
    seed[0].description = "mutated"
    seed.append(Task("b"))

    assert _descriptions(store) == ["a"]


def test_persisted_store_saves_after_each_mutation(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    store = TaskStore(path=path)

    store.add("Buy milk", TaskStatus.PENDING)
    assert json.loads(path.read_text("utf-8")) == [
        {"description": "Buy milk", "status": "pending"}
    ]

    store.remove(0)
    assert json.loads(path.read_text("utf-8")) == []


def test_in_memory_store_writes_nothing(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    store = TaskStore()
    store.add("Buy milk", TaskStatus.PENDING)
    assert list(tmp_path.iterdir()) == []


def test_load_missing_file_gives_empty_store(tmp_path: Path) -> None:
    store = TaskStore.load(tmp_path / "nope.json")
    assert store.is_empty()
    assert store.path == tmp_path / "nope.json"


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    store = TaskStore(path=path)
    store.add("Buy milk", TaskStatus.PENDING)
    store.add("Pay rent", TaskStatus.DONE)
    store.add("Call mom", TaskStatus.PENDING)

    reloaded = TaskStore.load(path)

    assert reloaded.list_tasks() == store.list_tasks()


def test_failed_save_keeps_mutation_in_memory(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.mkdir()  # a directory can't be replaced by a file
    store = TaskStore(path=path)

    with pytest.raises(PersistError) as exc_info:
        store.add("Buy milk", TaskStatus.PENDING)

    assert exc_info.value.task == Task("Buy milk", TaskStatus.PENDING)
    assert len(store) == 1

    with pytest.raises(PersistError) as exc_info:
        store.remove(0)

    assert exc_info.value.task == Task("Buy milk", TaskStatus.PENDING)
    assert len(store) == 0
