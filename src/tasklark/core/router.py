# src/tasklark/core/router.py

"""
Command router.

Maps a parsed `Command` onto a `TaskList` operation, turns the outcome into
a user-facing reply and writes the store after every mutation that did not
come from replaying save data.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..tasks.task_list import Failure, Outcome, TaskList, task_not_found
from .messages import (
    BYE_MESSAGE,
    DEADLINE_USAGE,
    EMPTY_LIST_MESSAGE,
    EVENT_USAGE,
    FIND_HEADER,
    INDENT,
    LIST_HEADER,
    MISSING_DESCRIPTION_MESSAGE,
    NO_MATCHES_MESSAGE,
    SAVE_FAILED_MESSAGE,
)
from .parser import Command
from .ports import TaskRepo

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Reply:
    text: str = ""
    ends_session: bool = False


CommandHandler = Callable[[Command, bool], Reply]


class CommandRouter:
    """Dispatch table for control commands; anything unregistered is a task type."""

    def __init__(self, task_list: TaskList, store: TaskRepo) -> None:
        self.task_list = task_list
        self.store = store
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

        self.register("bye", self._cmd_bye, "Say goodbye and stop.")
        self.register("list", self._cmd_list, "Show every task.")
        self.register("mark", self._cmd_mark, "Mark task <n> as done: mark <n>")
        self.register("unmark", self._cmd_mark, "Mark task <n> as not done: unmark <n>")
        self.register("delete", self._cmd_delete, "Delete task <n>: delete <n>")
        self.register("find", self._cmd_find, "Find tasks whose name contains <term>: find <term>")
        self.register("help", self._cmd_help, "Show this help.")

    def register(self, name: str, handler: CommandHandler, help_text: str) -> None:
        self._handlers[name] = handler
        self._help[name] = help_text

    def handle(self, command: Command, *, loading: bool = False) -> Reply:
        # Replayed save lines only ever create tasks; control commands never run from disk.
        handler = None if loading else self._handlers.get(command.command)
        if handler is None:
            return self._add_task(command, loading)
        return handler(command, loading)

    def build_help(self) -> str:
        lines = ["here's what i understand:"]
        for name, help_text in self._help.items():
            lines.append(f"{INDENT}{name} - {help_text}")
        lines.append(f"{INDENT}todo <description>")
        lines.append(f"{INDENT}{DEADLINE_USAGE}")
        lines.append(f"{INDENT}{EVENT_USAGE}")
        return "\n".join(lines)

    # ---- persistence ----

    def _persist(self) -> str | None:
        """Rewrite the store. Returns a user-facing warning if the write failed."""
        try:
            self.store.save(self.task_list)
        except OSError:
            logger.exception("Failed to save %d tasks.", len(self.task_list))
            return SAVE_FAILED_MESSAGE
        return None

    def _finish(self, outcome: Outcome, text: str, loading: bool) -> Reply:
        if outcome.changed and not loading:
            warning = self._persist()
            if warning:
                text = f"{text}\n{warning}" if text else warning
        return Reply(text)

    # ---- handlers ----

    def _cmd_bye(self, command: Command, loading: bool) -> Reply:
        return Reply(BYE_MESSAGE, ends_session=True)

    def _cmd_help(self, command: Command, loading: bool) -> Reply:
        return Reply(self.build_help())

    def _cmd_list(self, command: Command, loading: bool) -> Reply:
        if not len(self.task_list):
            return Reply(EMPTY_LIST_MESSAGE)
        return Reply(f"{LIST_HEADER}\n{self.task_list.render()}")

    @staticmethod
    def _parse_number(raw: str) -> int | None:
        token = raw.strip()
        digits = token.lstrip("+-")
        if not digits.isascii() or not digits.isdigit() or len(token) - len(digits) > 1:
            return None
        return int(token)

    def _cmd_mark(self, command: Command, loading: bool) -> Reply:
        number = self._parse_number(command.args)
        if number is None or number < 1:
            return Reply(task_not_found(command.args))

        marking = command.command == "mark"
        index = number - 1
        outcome = self.task_list.mark(index) if marking else self.task_list.unmark(index)
        if outcome.failure is Failure.NOT_FOUND or outcome.task is None:
            return Reply(task_not_found(command.args))

        verb = "marked" if marking else "unmarked"
        text = f"ok i've {verb} this task:\n{INDENT}{outcome.task.describe()}"
        return self._finish(outcome, text, loading)

    def _cmd_delete(self, command: Command, loading: bool) -> Reply:
        number = self._parse_number(command.args)
        if number is None or number < 1:
            return Reply(task_not_found(command.args))

        outcome = self.task_list.remove(number - 1)
        if outcome.failure is Failure.NOT_FOUND or outcome.task is None:
            return Reply(task_not_found(command.args))

        text = (
            f"alright, this task is gone:\n{INDENT}{outcome.task.describe()}\n"
            f"{self.task_list.list_size_message()}"
        )
        return self._finish(outcome, text, loading)

    def _cmd_find(self, command: Command, loading: bool) -> Reply:
        term = command.args
        if not term:
            return Reply(MISSING_DESCRIPTION_MESSAGE)
        matches = self.task_list.find(term)
        if not matches:
            return Reply(NO_MATCHES_MESSAGE.format(term=term))
        lines = [FIND_HEADER] + [f"{i}. {t.describe()}" for i, t in enumerate(matches, start=1)]
        return Reply("\n".join(lines))

    def _add_task(self, command: Command, loading: bool) -> Reply:
        outcome = self.task_list.add_to_list(
            command.command,
            command.args,
            command.is_marked,
            loading,
        )
        if loading and not outcome.ok:
            logger.warning(
                "Skipped saved task (%s): %s %s", outcome.failure, command.command, command.args
            )
        return self._finish(outcome, "" if loading else outcome.message, loading)
