# src/todo_tree/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes settings, opens the task store
and loads the tree into a fresh AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_store import JsonTaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, store: TaskRepo | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and store are injectable for tests; if settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    if store is None:
        store = JsonTaskStore(settings.tasks_path)

    tree = store.load()
    logger.info("State ready: %d task(s)", len(tree))
    return AppState(settings=settings, store=store, tree=tree)
