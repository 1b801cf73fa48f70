# src/todo_tree/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class Task:
    """
    A to-do item.

    Top-level tasks own an ordered list of subtasks. Subtasks use the same type
    but never get children of their own (the tree API offers no way to add one).
    """

    description: str
    completed: bool = False
    subtasks: list[Task] = field(default_factory=list)

    def toggle(self) -> bool:
        self.completed = not self.completed
        return self.completed

    def to_dict(self) -> dict[str, Any]:
        # Key order is the on-disk order; users may edit the file by hand.
        return {
            "description": self.description,
            "completed": self.completed,
            "subtasks": [s.to_dict() for s in self.subtasks],
        }

    @classmethod
    def from_dict(cls, raw: Any, *, depth: int = 1) -> Task:
        """
        Build a task from a decoded JSON object.

        Raises ValueError when the object does not have the expected shape.
        Children below the second level are dropped; the caller decides how to report it.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"task entry must be an object, got {type(raw).__name__}")

        description = raw.get("description")
        completed = raw.get("completed", False)
        subtasks_raw = raw.get("subtasks", [])

        if not isinstance(description, str):
            raise ValueError("task 'description' must be a string")
        if not isinstance(completed, bool):
            raise ValueError("task 'completed' must be a boolean")
        if not isinstance(subtasks_raw, list):
            raise ValueError("task 'subtasks' must be a list")

        subtasks: list[Task] = []
        if depth < 2:
            subtasks = [cls.from_dict(s, depth=depth + 1) for s in subtasks_raw]

        return cls(description=description, completed=completed, subtasks=subtasks)


@dataclass(frozen=True, slots=True)
class TaskRef:
    """Resolved identifier: 0-based task index and optional 0-based subtask index."""

    task_index: int
    subtask_index: int | None = None

    @property
    def is_subtask(self) -> bool:
        return self.subtask_index is not None

    @property
    def kind(self) -> str:
        return "Subtask" if self.is_subtask else "Task"
