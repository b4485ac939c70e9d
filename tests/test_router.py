# tests/test_router.py

from __future__ import annotations

import pytest

from tasklark.core.messages import (
    BYE_MESSAGE,
    EMPTY_LIST_MESSAGE,
    MISSING_DESCRIPTION_MESSAGE,
    SAVE_FAILED_MESSAGE,
    UNKNOWN_COMMAND_MESSAGE,
)
from tasklark.core.parser import Command
from tasklark.core.router import CommandRouter, Reply
from tasklark.tasks.task_list import TaskList

from .fakes import FakeTaskRepo


def _fill(router: CommandRouter, *names: str) -> None:
    for name in names:
        router.handle(Command("todo", name))


def test_add_persists_full_list(router: CommandRouter, repo: FakeTaskRepo) -> None:
    _fill(router, "read book", "walk dog")
    assert len(repo.saves) == 2
    assert repo.last == ["T |   | read book", "T |   | walk dog"]


def test_failed_adds_do_not_persist(router: CommandRouter, repo: FakeTaskRepo) -> None:
    _fill(router, "read book")
    assert router.handle(Command("todo", "read book")).text
    assert router.handle(Command("todo", "")).text == MISSING_DESCRIPTION_MESSAGE
    assert router.handle(Command("frobnicate", "x")).text == UNKNOWN_COMMAND_MESSAGE
    assert len(repo.saves) == 1


def test_replay_never_persists_or_echoes(router: CommandRouter, repo: FakeTaskRepo) -> None:
    reply = router.handle(Command("todo", "read book", "X"), loading=True)
    assert reply.text == ""
    assert repo.saves == []
    assert router.task_list[0].is_done is True


def test_list(router: CommandRouter) -> None:
    assert router.handle(Command("list")).text == EMPTY_LIST_MESSAGE
    _fill(router, "read book")
    router.handle(Command("deadline", "return book /by Sunday"))
    assert router.handle(Command("list")).text.splitlines()[1:] == [
        "1. [T][ ] read book",
        "2. [D][ ] return book (by: Sunday)",
    ]


def test_mark_and_unmark(router: CommandRouter, repo: FakeTaskRepo) -> None:
    _fill(router, "read book")

    reply = router.handle(Command("mark", "1"))
    assert reply.text == "ok i've marked this task:\n  [T][X] read book"
    assert repo.last == ["T | X | read book"]

    reply = router.handle(Command("unmark", "1"))
    assert reply.text == "ok i've unmarked this task:\n  [T][ ] read book"
    assert repo.last == ["T |   | read book"]


@pytest.mark.parametrize("command", ["mark", "unmark", "delete"])
@pytest.mark.parametrize("raw", ["0", "-1", "3", "abc", "", "1.5"])
def test_bad_numbers_report_raw_token(
    router: CommandRouter, repo: FakeTaskRepo, command: str, raw: str
) -> None:
    _fill(router, "a", "b")
    saves_before = len(repo.saves)

    reply = router.handle(Command(command, raw))

    assert reply.text == f"task {raw} doesn't exist...try another number!"
    assert [t.describe() for t in router.task_list] == ["[T][ ] a", "[T][ ] b"]
    assert len(repo.saves) == saves_before


def test_delete(router: CommandRouter, repo: FakeTaskRepo) -> None:
    _fill(router, "a", "b")
    reply = router.handle(Command("delete", "1"))

    assert "[T][ ] a" in reply.text
    assert reply.text.endswith("your list has 1 item now.")
    assert repo.last == ["T |   | b"]


def test_find(router: CommandRouter) -> None:
    _fill(router, "buy milk", "walk dog", "milk the cow")
    assert router.handle(Command("find", "milk")).text.splitlines()[1:] == [
        "1. [T][ ] buy milk",
        "2. [T][ ] milk the cow",
    ]
    assert "couldn't find" in router.handle(Command("find", "Milk")).text
    assert router.handle(Command("find", "")).text == MISSING_DESCRIPTION_MESSAGE


def test_bye_and_help(router: CommandRouter) -> None:
    bye = router.handle(Command("bye"))
    assert bye.text == BYE_MESSAGE
    assert bye.ends_session

    help_text = router.handle(Command("help")).text
    for name in ("list", "mark", "unmark", "delete", "find", "bye"):
        assert f"{name} - " in help_text
    assert "/by" in help_text and "/from" in help_text


def test_store_write_failure_is_reported() -> None:
    router = CommandRouter(TaskList(), FakeTaskRepo(fail=True))
    reply = router.handle(Command("todo", "read book"))

    assert reply.text.endswith(SAVE_FAILED_MESSAGE)
    assert len(router.task_list) == 1


def test_custom_handler_registration(router: CommandRouter) -> None:
    router.register("ping", lambda command, loading: Reply("pong"), "Reply with pong.")
    assert router.handle(Command("ping")).text == "pong"
    assert "ping - Reply with pong." in router.build_help()


def test_find_numbers_matches_in_match_order(router: CommandRouter) -> None:
    _fill(router, "walk dog", "buy milk")
    assert router.handle(Command("find", "milk")).text.splitlines()[1:] == ["1. [T][ ] buy milk"]


@pytest.mark.parametrize("raw", ["1_0", "١", "+-1", "1e1"])
def test_numbers_must_be_plain_ascii_digits(
    router: CommandRouter, repo: FakeTaskRepo, raw: str
) -> None:
    _fill(router, *[f"t{i}" for i in range(12)])

    reply = router.handle(Command("mark", raw))

    assert reply.text == f"task {raw} doesn't exist...try another number!"
    assert not any(t.is_done for t in router.task_list)


def test_signed_number_is_accepted(router: CommandRouter) -> None:
    _fill(router, "a")
    assert "[T][X] a" in router.handle(Command("mark", "+1")).text


def test_replay_ignores_control_commands(router: CommandRouter, repo: FakeTaskRepo) -> None:
    _fill(router, "a")
    for cmd in (Command("delete", "1"), Command("mark", "1", "X"), Command("bye")):
        reply = router.handle(cmd, loading=True)
        assert reply.text == ""
        assert not reply.ends_session

    assert [t.describe() for t in router.task_list] == ["[T][ ] a"]
    assert len(repo.saves) == 1
