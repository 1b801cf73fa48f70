# src/todo_tree/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from .task_tree import TaskTree

logger = logging.getLogger(__name__)


def _count_dropped_levels(raw: Any) -> int:
    """Count subtasks that carry children of their own (they are dropped on load)."""
    if not isinstance(raw, list):
        return 0
    n = 0
    for task in raw:
        if not isinstance(task, dict):
            continue
        subtasks = task.get("subtasks")
        if not isinstance(subtasks, list):
            continue
        for sub in subtasks:
            if isinstance(sub, dict) and sub.get("subtasks"):
                n += 1
    return n


class JsonTaskStore:
    """
    JSON file store for the whole task tree.

    - load(): missing or unparsable file -> empty tree (logged, never raised)
    - save(): full overwrite via temp file + os.replace; write errors propagate
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskTree:
        path = self._path
        if not path.exists():
            logger.info("Task file %s not found; starting with an empty list.", path)
            return TaskTree()

        try:
            data = json.loads(path.read_text("utf-8"))
            tree = TaskTree.from_list(data)
            dropped = _count_dropped_levels(data)
        except (OSError, ValueError, RecursionError):
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors too;
            # absurdly deep nesting makes the decoder hit the recursion limit.
            logger.warning("Failed to load tasks from %s; starting empty.", path, exc_info=True)
            return TaskTree()

        if dropped:
            logger.warning(
                "Dropped nested children of %d subtask(s) in %s (only two levels are kept).",
                dropped,
                path,
            )
        logger.info("Loaded %d task(s) from %s", len(tree), path)
        return tree

    def save(self, tree: TaskTree) -> None:
        path = self._path
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(tree.to_list(), ensure_ascii=False, indent=2) + "\n"

        tmp = path.with_name(path.name + ".tmp")
        tmp.write_text(payload, "utf-8")
        os.replace(tmp, path)
        logger.debug("Saved %d task(s) to %s", len(tree), path)
