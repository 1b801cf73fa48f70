# tests/test_commands.py

from __future__ import annotations

import json

import pytest

from todo_tree.cli.commands import CommandRegistry, registry
from todo_tree.core.state import AppState
from todo_tree.tasks.errors import InvalidIndexError
from todo_tree.tasks.task_tree import TaskTree

from .fakes import FakeTaskRepo, descriptions


@pytest.fixture()
def fake_state(settings, sample_tree: TaskTree) -> AppState:
    repo = FakeTaskRepo(sample_tree)
    return AppState(settings=settings, store=repo, tree=repo.load())


def run(state: AppState, line: str) -> str | None:
    return registry.execute(state, line).message


def test_add_on_empty_tree_saves_and_relists(state: AppState) -> None:
    result = registry.execute(state, "a Buy milk")

    assert result.message == "Task added successfully."
    assert result.show_listing and result.saved and not result.quit
    assert len(state.tree) == 1
    assert state.tree.tasks[0].description == "Buy milk"
    assert state.tree.tasks[0].completed is False

    on_disk = json.loads(state.settings.tasks_path.read_text("utf-8"))
    assert on_disk == [{"description": "Buy milk", "completed": False, "subtasks": []}]


def test_add_rejoins_words_with_single_spaces(state: AppState) -> None:
    run(state, "a   Buy    oat   milk ")
    assert descriptions(state.tree) == ["Buy oat milk"]


def test_add_subtask(state: AppState) -> None:
    run(state, "a Buy milk")
    assert run(state, "s 1 Get bread") == "Subtask added successfully."
    assert [s.description for s in state.tree.tasks[0].subtasks] == ["Get bread"]


@pytest.mark.parametrize("line", ["s 4 nope", "s 0 nope", "s x nope", "s", "s 1.1 nope"])
def test_add_subtask_invalid_task(fake_state: AppState, line: str) -> None:
    before = fake_state.tree.to_list()
    assert run(fake_state, line) == "Invalid task number."
    assert fake_state.tree.to_list() == before


def test_toggle_subtask(state: AppState) -> None:
    run(state, "a Buy milk")
    run(state, "s 1 Get bread")
    assert run(state, "x 1.1") == "Subtask status toggled."
    assert state.tree.tasks[0].subtasks[0].completed is True
    assert state.tree.tasks[0].completed is False


@pytest.mark.parametrize(
    ("line", "message"),
    [
        ("x 2", "Task status toggled."),
        ("x 4", "Invalid task number."),
        ("x 2.1", "Invalid subtask number."),
        ("x", "Invalid task number."),
        ("d 3.1", "Subtask removed successfully."),
        ("d 1", "Task removed successfully."),
        ("d 1.3", "Invalid subtask number."),
        ("r 2 Ironing", "Task renamed successfully."),
        ("r 1.2 Rye bread", "Subtask renamed successfully."),
        ("r 1.9 x", "Invalid subtask number."),
        ("r 9 x", "Invalid task number."),
        ("h 2", "Task moved up."),
        ("h 1", "Cannot move task up."),
        ("h 1.2", "Subtask moved up."),
        ("h 1.1", "Cannot move subtask up."),
        ("h 2.1", "Cannot move subtask up."),
        ("h 4", "Invalid task number."),
        ("l 2", "Task moved down."),
        ("l 3", "Cannot move task down."),
        ("l 1.1", "Subtask moved down."),
        ("l 1.2", "Cannot move subtask down."),
        ("l 0", "Invalid task number."),
        ("z", "Invalid command. Type ? for help."),
        ("", "Invalid command. Type ? for help."),
        ("A new", "Invalid command. Type ? for help."),
    ],
)
def test_command_messages(fake_state: AppState, line: str, message: str) -> None:
    assert run(fake_state, line) == message


def test_remove_task_discards_its_subtasks(fake_state: AppState) -> None:
    run(fake_state, "d 1")
    assert descriptions(fake_state.tree) == ["Laundry", "Taxes"]
    assert fake_state.tree.tasks[1].subtasks[0].description == "Receipts"


def test_rename_keeps_completion_and_accepts_multiword(fake_state: AppState) -> None:
    run(fake_state, "r 2 Fold  the laundry")
    task = fake_state.tree.tasks[1]
    assert task.description == "Fold the laundry"
    assert task.completed is True


def test_failed_commands_still_save_and_relist(fake_state: AppState) -> None:
    repo = fake_state.store
    assert isinstance(repo, FakeTaskRepo)

    for line in ("d 9", "h 1", "bogus", "r 9 x"):
        result = registry.execute(fake_state, line)
        assert result.saved and result.show_listing

    assert len(repo.saves) == 4
    assert repo.saves[-1] == repo.load().to_list()


def test_list_help_and_quit_do_not_save(fake_state: AppState) -> None:
    repo = fake_state.store
    assert isinstance(repo, FakeTaskRepo)

    listing = registry.execute(fake_state, "t")
    assert listing.message is not None and listing.message.startswith("Current tasks:")
    assert not listing.saved and not listing.show_listing

    help_result = registry.execute(fake_state, "?")
    assert help_result.message is not None
    assert help_result.message.splitlines()[0] == "Available commands:"
    assert "q - Quit the application" in help_result.message
    assert not help_result.saved

    quit_result = registry.execute(fake_state, "q")
    assert quit_result.quit and not quit_result.saved and quit_result.message is None

    assert repo.saves == []


def test_help_lists_every_command_in_order() -> None:
    lines = registry.build_help().splitlines()
    assert [line[0] for line in lines[1:]] == list("astxdhlr?q")
    assert "r <task number>[.<subtask number>] <new description> - Rename task or subtask" in lines


def test_moving_first_up_or_last_down_is_a_reported_no_op(fake_state: AppState) -> None:
    before = fake_state.tree.to_list()
    assert run(fake_state, "h 1") == "Cannot move task up."
    assert run(fake_state, "l 3") == "Cannot move task down."
    assert fake_state.tree.to_list() == before


def test_delete_on_empty_tree(state: AppState) -> None:
    assert run(state, "d 1") == "Invalid task number."
    assert len(state.tree) == 0


def test_registry_reports_handler_errors_and_crashes(state: AppState) -> None:
    reg = CommandRegistry()

    def fails(state, args):
        raise InvalidIndexError("Invalid task number.")

    def crashes(state, args):
        raise RuntimeError("boom")

    reg.register("f", fails, "fails")
    reg.register("c", crashes, "crashes")

    assert reg.execute(state, "f").message == "Invalid task number."
    crashed = reg.execute(state, "c 1")
    assert crashed.message == "Internal error while handling a command."
    assert crashed.saved
    assert state.settings.tasks_path.exists()
