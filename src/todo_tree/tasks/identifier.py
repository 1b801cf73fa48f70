# src/todo_tree/tasks/identifier.py

"""
Identifier resolution: "N" addresses task N, "N.M" addresses subtask M of task N.

Numbers are 1-based on input and 0-based in the returned TaskRef.
Malformed numbers fail the command instead of silently turning into 0.
"""

from __future__ import annotations

import re

from .errors import InvalidIndexError
from .task_models import TaskRef
from .task_tree import INVALID_SUBTASK, INVALID_TASK, TaskTree

_NUMBER = re.compile(r"[0-9]+")


def _to_index(segment: str, message: str) -> int:
    segment = segment.strip()
    if not _NUMBER.fullmatch(segment):
        raise InvalidIndexError(message)
    return int(segment) - 1


def parse_identifier(token: str | None) -> TaskRef:
    """Split on the first '.' and convert both parts; no bounds checks here."""
    if token is None:
        raise InvalidIndexError(INVALID_TASK)

    task_part, sep, subtask_part = token.partition(".")
    task_index = _to_index(task_part, INVALID_TASK)
    if not sep:
        return TaskRef(task_index)
    return TaskRef(task_index, _to_index(subtask_part, INVALID_SUBTASK))


def validate(tree: TaskTree, ref: TaskRef) -> TaskRef:
    if not tree.is_valid_task_index(ref.task_index):
        raise InvalidIndexError(INVALID_TASK)
    if ref.subtask_index is not None and not tree.is_valid_subtask_index(
        ref.task_index, ref.subtask_index
    ):
        raise InvalidIndexError(INVALID_SUBTASK)
    return ref


def resolve(tree: TaskTree, token: str | None) -> TaskRef:
    return validate(tree, parse_identifier(token))
