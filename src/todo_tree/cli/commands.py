# src/todo_tree/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.errors import InvalidCommandError, InvalidIndexError, TodoError
from ..tasks.identifier import parse_identifier, resolve
from ..tasks.task_tree import INVALID_TASK
from .render import render_screen

CommandHandler = Callable[[AppState, list[str]], str | None]

INVALID_COMMAND = "Invalid command. Type ? for help."
INTERNAL_ERROR = "Internal error while handling a command."

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    message: str | None = None
    show_listing: bool = False
    saved: bool = False
    quit: bool = False


@dataclass(frozen=True, slots=True)
class _Command:
    handler: CommandHandler
    usage: str
    help_text: str
    refresh: bool
    quits: bool


class CommandRegistry:
    """
    Single-letter command registry.

    "Refreshing" commands are complete transactions: after the handler runs the
    tree is saved and the caller re-lists it, whether the handler succeeded or not.
    Unknown commands are treated the same way.
    """

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        *,
        usage: str | None = None,
        refresh: bool = True,
        quits: bool = False,
    ) -> None:
        self._commands[name] = _Command(
            handler=handler,
            usage=usage or name,
            help_text=help_text,
            refresh=refresh,
            quits=quits,
        )

    def _lookup(self, name: str) -> _Command:
        cmd = self._commands.get(name)
        if cmd is None:
            raise InvalidCommandError(INVALID_COMMAND)
        return cmd

    def execute(self, state: AppState, line: str) -> CommandResult:
        """Run one input line against the state. Never raises for user errors."""
        parts = line.split()
        name = parts[0] if parts else ""
        args = parts[1:]

        try:
            cmd = self._lookup(name)
        except InvalidCommandError as e:
            logger.debug("Unknown command %r", name)
            state.save()
            return CommandResult(message=e.message, show_listing=True, saved=True)

        try:
            message = cmd.handler(state, args)
        except TodoError as e:
            logger.debug("Command %r failed: %s", line, e.message)
            message = e.message
        except Exception:
            logger.exception("Command handler crashed: %r", line)
            message = INTERNAL_ERROR

        if cmd.refresh:
            state.save()

        return CommandResult(
            message=message,
            show_listing=cmd.refresh,
            saved=cmd.refresh,
            quit=cmd.quits,
        )

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for cmd in self._commands.values():
            lines.append(f"{cmd.usage} - {cmd.help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _rest(args: list[str], start: int) -> str:
    return " ".join(args[start:])


def _first(args: list[str]) -> str | None:
    return args[0] if args else None


def cmd_add(state: AppState, args: list[str]) -> str:
    state.tree.append_task(_rest(args, 0))
    return "Task added successfully."


def cmd_add_subtask(state: AppState, args: list[str]) -> str:
    """s <task number> <description>; only a plain task number is accepted."""
    ref = parse_identifier(_first(args))
    if ref.is_subtask:
        raise InvalidIndexError(INVALID_TASK)
    state.tree.append_subtask(ref.task_index, _rest(args, 1))
    return "Subtask added successfully."


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_screen(state.tree)


def cmd_toggle(state: AppState, args: list[str]) -> str:
    ref = resolve(state.tree, _first(args))
    state.tree.toggle(ref)
    return f"{ref.kind} status toggled."


def cmd_remove(state: AppState, args: list[str]) -> str:
    ref = resolve(state.tree, _first(args))
    state.tree.remove(ref)
    return f"{ref.kind} removed successfully."


def cmd_move_up(state: AppState, args: list[str]) -> str:
    ref = parse_identifier(_first(args))
    state.tree.move_up(ref)
    return f"{ref.kind} moved up."


def cmd_move_down(state: AppState, args: list[str]) -> str:
    ref = parse_identifier(_first(args))
    state.tree.move_down(ref)
    return f"{ref.kind} moved down."


def cmd_rename(state: AppState, args: list[str]) -> str:
    ref = resolve(state.tree, _first(args))
    state.tree.rename(ref, _rest(args, 1))
    return f"{ref.kind} renamed successfully."


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_quit(state: AppState, args: list[str]) -> None:
    return None


registry.register("a", cmd_add, "Add a new task", usage="a <task description>")
registry.register(
    "s",
    cmd_add_subtask,
    "Add a subtask to a task",
    usage="s <task number> <subtask description>",
)
registry.register("t", cmd_list, "List all tasks", refresh=False)
registry.register(
    "x",
    cmd_toggle,
    "Mark task or subtask as complete/incomplete",
    usage="x <task number>[.<subtask number>]",
)
registry.register(
    "d", cmd_remove, "Remove task or subtask", usage="d <task number>[.<subtask number>]"
)
registry.register(
    "h", cmd_move_up, "Move task or subtask higher", usage="h <task number>[.<subtask number>]"
)
registry.register(
    "l", cmd_move_down, "Move task or subtask lower", usage="l <task number>[.<subtask number>]"
)
registry.register(
    "r",
    cmd_rename,
    "Rename task or subtask",
    usage="r <task number>[.<subtask number>] <new description>",
)
registry.register("?", cmd_help, "Show this help message", refresh=False)
registry.register("q", cmd_quit, "Quit the application", refresh=False, quits=True)
