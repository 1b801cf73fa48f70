# src/todo_tree/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the task file), then runs the
console loop until the user quits.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from .bootstrap import create_initial_state

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    console_level = getattr(logging, str(settings.log_level).upper(), logging.WARNING)
    log_file = settings.log_path if settings.log_file_enabled else None
    setup_logging(log_file=log_file, console_level=console_level)

    logger.info("Starting %s (tasks file: %s)...", settings.app_name, settings.tasks_path)

    state = create_initial_state(settings=settings)
    run_console_loop(state)

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
