# src/todo_tree/tasks/errors.py

from __future__ import annotations


class TodoError(Exception):
    """Base class for errors that are reported to the user as a single message line."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidIndexError(TodoError):
    """Task/subtask number out of range, malformed, or a move past a list boundary."""


class InvalidCommandError(TodoError):
    """Unrecognized command letter."""
