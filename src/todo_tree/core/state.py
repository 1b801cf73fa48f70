# src/todo_tree/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_tree import TaskTree
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (real Settings or a test namespace).
    settings: Any

    store: TaskRepo
    tree: TaskTree = field(default_factory=TaskTree)

    def save(self) -> None:
        self.store.save(self.tree)
