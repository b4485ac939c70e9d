# src/tasklark/tasks/task_list.py

"""
In-memory task list.

The list owns the ordered collection of tasks and answers queries about it.
It never persists itself: every mutating operation returns an `Outcome` and
the caller (the command router) decides whether to write the store.

Indexes are 0-based here; the router converts from the 1-based numbers users type.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from ..core.messages import (
    DEADLINE_USAGE,
    DUPLICATE_TASK_MESSAGE,
    EVENT_USAGE,
    INDENT,
    MISSING_DESCRIPTION_MESSAGE,
    UNKNOWN_COMMAND_MESSAGE,
    malformed_message,
)
from .task_models import Deadline, Event, Task, TaskType, Todo

logger = logging.getLogger(__name__)

# (live input, replayed save data)
BY_SEPARATORS = (" /by ", " by ")
FROM_SEPARATORS = (" /from ", " from ")
TO_SEPARATORS = (" /to ", " to ")

ADDED_HEADERS: dict[TaskType, str] = {
    TaskType.TODO: "i've thrown this to-do into your task list:",
    TaskType.DEADLINE: "the new deadline's been added to your task list:",
    TaskType.EVENT: "aaaaand this event is now in your task list:",
}


class Failure(StrEnum):
    """Expected (non-exceptional) failure kinds of task list operations."""

    MISSING_DESCRIPTION = "missing_description"
    UNKNOWN_COMMAND = "unknown_command"
    MALFORMED_INPUT = "malformed_input"
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of a task list operation: either a touched task or a named failure."""

    message: str = ""
    task: Task | None = None
    failure: Failure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def changed(self) -> bool:
        return self.ok and self.task is not None

    @classmethod
    def fail(cls, failure: Failure, message: str = "") -> Outcome:
        return cls(message=message, failure=failure)


def task_not_found(number: object) -> str:
    return f"task {number} doesn't exist...try another number!"


class TaskList:
    def __init__(self, tasks: list[Task] | None = None) -> None:
        self._tasks: list[Task] = []
        for t in tasks or []:
            self.add(t)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[index]

    # ---- basic mutation ----

    def check_duplicate(self, new_task: Task) -> bool:
        return any(new_task == t for t in self._tasks)

    def add(self, task: Task) -> bool:
        if self.check_duplicate(task):
            return False
        self._tasks.append(task)
        return True

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._tasks)

    def remove(self, index: int) -> Outcome:
        if not self._in_range(index):
            return Outcome.fail(Failure.NOT_FOUND, task_not_found(index + 1))
        task = self._tasks.pop(index)
        logger.debug("Removed task index=%s task=%r", index, task)
        return Outcome(task=task)

    def mark(self, index: int) -> Outcome:
        return self._set_done(index, True)

    def unmark(self, index: int) -> Outcome:
        return self._set_done(index, False)

    def _set_done(self, index: int, done: bool) -> Outcome:
        if not self._in_range(index):
            return Outcome.fail(Failure.NOT_FOUND, task_not_found(index + 1))
        task = self._tasks[index]
        task.is_done = done
        return Outcome(task=task)

    # ---- queries ----

    def find(self, search_term: str) -> list[Task]:
        return [t for t in self._tasks if search_term in t.name]

    def list_size_message(self) -> str:
        n = len(self._tasks)
        return f"your list has {n} item{'' if n == 1 else 's'} now."

    def render(self) -> str:
        return "\n".join(f"{i}. {t.describe()}" for i, t in enumerate(self._tasks, start=1))

    def to_save_lines(self) -> list[str]:
        return [t.to_save_line() for t in self._tasks]

    # ---- task creation ----

    def add_to_list(
        self,
        type_name: str,
        details: str,
        is_marked: bool = False,
        is_loading_from_disk: bool = False,
    ) -> Outcome:
        """
        Create a task of any variant from its command word and argument text.

        While loading from disk all messages are empty; the mutation still happens.
        """
        try:
            task_type = TaskType(type_name)
        except ValueError:
            return Outcome.fail(Failure.UNKNOWN_COMMAND, UNKNOWN_COMMAND_MESSAGE)

        details = details.strip()
        if not details:
            return Outcome.fail(Failure.MISSING_DESCRIPTION, MISSING_DESCRIPTION_MESSAGE)

        replay = 1 if is_loading_from_disk else 0
        if task_type is TaskType.DEADLINE:
            task = _build_deadline(details, is_marked, replay)
        elif task_type is TaskType.EVENT:
            task = _build_event(details, is_marked, replay)
        else:
            task = Todo(name=details, is_done=is_marked)

        if task is None:
            usage = DEADLINE_USAGE if task_type is TaskType.DEADLINE else EVENT_USAGE
            return Outcome.fail(Failure.MALFORMED_INPUT, malformed_message(usage))

        if not self.add(task):
            logger.debug("Rejected duplicate task %r", task)
            return Outcome.fail(
                Failure.DUPLICATE, "" if is_loading_from_disk else DUPLICATE_TASK_MESSAGE
            )

        if is_loading_from_disk:
            return Outcome(task=task)

        message = "\n".join(
            (ADDED_HEADERS[task_type], INDENT + task.describe(), self.list_size_message())
        )
        return Outcome(message=message, task=task)


def _split_once(text: str, separator: str, *, last: bool = False) -> tuple[str, str] | None:
    head, sep, tail = text.rpartition(separator) if last else text.partition(separator)
    if not sep:
        return None
    head, tail = head.strip(), tail.strip()
    if not head or not tail:
        return None
    return head, tail


def _build_deadline(details: str, is_marked: bool, replay: int) -> Deadline | None:
    # Saved lines split on the last " by " so names like "stand by me" survive a reload.
    parts = _split_once(details, BY_SEPARATORS[replay], last=bool(replay))
    if parts is None:
        return None
    name, by = parts
    return Deadline(name=name, is_done=is_marked, by=by)


def _build_event(details: str, is_marked: bool, replay: int) -> Event | None:
    if replay:
        # Saved lines: end after the last " to ", start after the last " from " before it.
        rest = _split_once(details, TO_SEPARATORS[replay], last=True)
        if rest is None:
            return None
        head, end = rest
        parts = _split_once(head, FROM_SEPARATORS[replay], last=True)
        if parts is None:
            return None
        name, start = parts
        return Event(name=name, is_done=is_marked, start=start, end=end)

    parts = _split_once(details, FROM_SEPARATORS[replay])
    if parts is None:
        return None
    name, timings = parts
    times = _split_once(timings, TO_SEPARATORS[replay])
    if times is None:
        return None
    start, end = times
    return Event(name=name, is_done=is_marked, start=start, end=end)
