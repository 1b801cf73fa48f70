# src/todo_tree/tasks/task_tree.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from .errors import InvalidIndexError
from .task_models import Task, TaskRef

logger = logging.getLogger(__name__)

INVALID_TASK = "Invalid task number."
INVALID_SUBTASK = "Invalid subtask number."


class TaskTree:
    """
    Ordered list of top-level tasks, each with an ordered list of subtasks.

    Two API layers only: top-level operations, and subtask operations
    parameterized by the parent index. All indices are 0-based.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskTree):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"TaskTree({self._tasks!r})"

    @property
    def tasks(self) -> list[Task]:
        return self._tasks

    # ---- validation ----

    def is_valid_task_index(self, task_index: int) -> bool:
        return 0 <= task_index < len(self._tasks)

    def is_valid_subtask_index(self, task_index: int, subtask_index: int) -> bool:
        # Only meaningful once task_index is known valid.
        if not self.is_valid_task_index(task_index):
            return False
        return 0 <= subtask_index < len(self._tasks[task_index].subtasks)

    def task_at(self, task_index: int) -> Task:
        if not self.is_valid_task_index(task_index):
            raise InvalidIndexError(INVALID_TASK)
        return self._tasks[task_index]

    def subtask_at(self, task_index: int, subtask_index: int) -> Task:
        parent = self.task_at(task_index)
        if not 0 <= subtask_index < len(parent.subtasks):
            raise InvalidIndexError(INVALID_SUBTASK)
        return parent.subtasks[subtask_index]

    def get(self, ref: TaskRef) -> Task:
        if ref.subtask_index is None:
            return self.task_at(ref.task_index)
        return self.subtask_at(ref.task_index, ref.subtask_index)

    # ---- creation ----

    def append_task(self, description: str) -> Task:
        task = Task(description)
        self._tasks.append(task)
        logger.debug("Appended task #%d: %r", len(self._tasks), description)
        return task

    def append_subtask(self, task_index: int, description: str) -> Task:
        parent = self.task_at(task_index)
        subtask = Task(description)
        parent.subtasks.append(subtask)
        logger.debug(
            "Appended subtask #%d.%d: %r", task_index + 1, len(parent.subtasks), description
        )
        return subtask

    # ---- in-place mutation ----

    def toggle(self, ref: TaskRef) -> bool:
        return self.get(ref).toggle()

    def rename(self, ref: TaskRef, description: str) -> None:
        self.get(ref).description = description

    # ---- removal ----

    def remove_at(self, task_index: int) -> Task:
        self.task_at(task_index)
        return self._tasks.pop(task_index)

    def remove_subtask_at(self, task_index: int, subtask_index: int) -> Task:
        self.subtask_at(task_index, subtask_index)
        return self._tasks[task_index].subtasks.pop(subtask_index)

    def remove(self, ref: TaskRef) -> Task:
        if ref.subtask_index is None:
            return self.remove_at(ref.task_index)
        return self.remove_subtask_at(ref.task_index, ref.subtask_index)

    # ---- reordering ----

    @staticmethod
    def swap_adjacent(items: list[Task], i: int, j: int) -> None:
        if abs(i - j) != 1:
            raise ValueError(f"swap_adjacent needs neighbouring positions, got {i} and {j}")
        items[i], items[j] = items[j], items[i]

    def _siblings(self, ref: TaskRef, *, direction: str) -> tuple[list[Task], int]:
        """
        Return the list holding `ref` and its position in it.

        Any failure at the subtask level is reported as a move failure, like a boundary hit.
        """
        if not self.is_valid_task_index(ref.task_index):
            raise InvalidIndexError(INVALID_TASK)
        if ref.subtask_index is None:
            return self._tasks, ref.task_index
        if not self.is_valid_subtask_index(ref.task_index, ref.subtask_index):
            raise InvalidIndexError(f"Cannot move subtask {direction}.")
        return self._tasks[ref.task_index].subtasks, ref.subtask_index

    def move_up(self, ref: TaskRef) -> None:
        items, pos = self._siblings(ref, direction="up")
        if pos == 0:
            raise InvalidIndexError(f"Cannot move {ref.kind.lower()} up.")
        self.swap_adjacent(items, pos, pos - 1)

    def move_down(self, ref: TaskRef) -> None:
        items, pos = self._siblings(ref, direction="down")
        if pos >= len(items) - 1:
            raise InvalidIndexError(f"Cannot move {ref.kind.lower()} down.")
        self.swap_adjacent(items, pos, pos + 1)

    # ---- (de)serialization ----

    def to_list(self) -> list[dict[str, Any]]:
        return [t.to_dict() for t in self._tasks]

    @classmethod
    def from_list(cls, raw: Any) -> TaskTree:
        if not isinstance(raw, list):
            raise ValueError(f"task list must be a JSON array, got {type(raw).__name__}")
        return cls(Task.from_dict(item) for item in raw)
