# src/todo_tree/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..cli.render import render_screen
from ..core.ports import Terminal
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "> "
BANNER = ("Welcome to the To-Do App!", "Type ? for help or q to quit.")


class StdTerminal:
    """Terminal port backed by input()/print()."""

    def read_line(self, prompt: str) -> str:
        return input(prompt)

    def write(self, text: str = "") -> None:
        print(text, flush=True)


def run_console_loop(
    state: AppState,
    terminal: Terminal | None = None,
    registry: CommandRegistry | None = None,
) -> None:
    term = terminal or StdTerminal()
    reg = registry or command_registry
    logger.info("Console started (tasks=%d).", len(state.tree))

    for line in BANNER:
        term.write(line)
    term.write()
    term.write(render_screen(state.tree))
    term.write()

    while True:
        try:
            user_input = term.read_line(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            term.write()
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            term.write()
            break

        term.write()
        result = reg.execute(state, user_input)
        if result.quit:
            logger.info("Console quit command received.")
            break

        if result.message is not None:
            term.write(result.message)
        if result.show_listing:
            term.write(render_screen(state.tree))
        term.write()

    logger.info("Console finished.")
