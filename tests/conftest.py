# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tree.core.state import AppState
from todo_tree.tasks.task_models import Task
from todo_tree.tasks.task_store import JsonTaskStore
from todo_tree.tasks.task_tree import TaskTree


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    A SimpleNamespace instead of real config keeps tests independent of the environment.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        log_file_enabled=False,
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "tasks.json",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState with an empty tree and a real JSON store in tmp_path."""
    return AppState(settings=settings, store=JsonTaskStore(settings.tasks_path))


@pytest.fixture()
def sample_tree() -> TaskTree:
    """
    1. [ ] Groceries
       1.1. [ ] Milk
       1.2. [X] Bread
    2. [X] Laundry
    3. [ ] Taxes
       3.1. [ ] Receipts
    """
    return TaskTree(
        [
            Task("Groceries", subtasks=[Task("Milk"), Task("Bread", completed=True)]),
            Task("Laundry", completed=True),
            Task("Taxes", subtasks=[Task("Receipts")]),
        ]
    )