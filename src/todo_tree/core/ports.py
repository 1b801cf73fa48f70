# src/todo_tree/core/ports.py

"""
Ports (interfaces) used by the app.

The command engine and the console loop depend on Protocols instead of concrete
implementations, so the JSON store and the real terminal can be swapped in tests.
"""

from __future__ import annotations

from typing import Protocol

from ..tasks.task_tree import TaskTree


class TaskRepo(Protocol):
    """Whole-tree persistence: load once at startup, save after each mutating command."""

    def load(self) -> TaskTree: ...

    def save(self, tree: TaskTree) -> None: ...


class Terminal(Protocol):
    """Line-oriented terminal. read_line raises EOFError when input is exhausted."""

    def read_line(self, prompt: str) -> str: ...

    def write(self, text: str = "") -> None: ...
