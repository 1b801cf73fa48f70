# src/todo_tree/cli/render.py

from __future__ import annotations

from ..tasks.task_models import Task
from ..tasks.task_tree import TaskTree

EMPTY_LISTING = "No tasks."
LISTING_HEADER = "Current tasks:"


def _mark(task: Task) -> str:
    return "X" if task.completed else " "


def render_listing(tree: TaskTree) -> str:
    if not len(tree):
        return EMPTY_LISTING

    lines: list[str] = []
    for i, task in enumerate(tree, start=1):
        lines.append(f"{i}. [{_mark(task)}] {task.description}")
        for j, sub in enumerate(task.subtasks, start=1):
            lines.append(f"   {i}.{j}. [{_mark(sub)}] {sub.description}")
    return "\n".join(lines)


def render_screen(tree: TaskTree) -> str:
    """Listing as shown in the console: a header over non-empty listings."""
    if not len(tree):
        return EMPTY_LISTING
    return f"{LISTING_HEADER}\n\n{render_listing(tree)}"