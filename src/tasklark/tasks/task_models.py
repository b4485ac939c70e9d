# src/tasklark/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

SAVE_DELIMITER = " | "


class TaskType(StrEnum):
    """
    Task variants.

    The value is the command word used to create the task;
    `tag` is the one-letter marker used in rendering and in the save file.
    """

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"

    @property
    def tag(self) -> str:
        return self.value[0].upper()

    @classmethod
    def from_tag(cls, tag: str) -> TaskType | None:
        for t in cls:
            if t.tag == tag.strip().upper():
                return t
        return None


@dataclass(eq=False, slots=True)
class Task:
    name: str
    is_done: bool = False

    kind = TaskType.TODO

    def __eq__(self, other: object) -> bool:
        # Duplicate rule: same variant + same name. Time fields are ignored.
        if not isinstance(other, Task):
            return NotImplemented
        return type(self) is type(other) and self.name == other.name

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def details(self) -> str:
        return ""

    def describe(self) -> str:
        return f"[{self.kind.tag}][{self.status_icon}] {self.name}{self.details()}"

    def save_body(self) -> str:
        return self.name

    def to_save_line(self) -> str:
        return SAVE_DELIMITER.join((self.kind.tag, self.status_icon, self.save_body()))


@dataclass(eq=False, slots=True)
class Todo(Task):
    kind = TaskType.TODO


@dataclass(eq=False, slots=True)
class Deadline(Task):
    by: str = ""

    kind = TaskType.DEADLINE

    def details(self) -> str:
        return f" (by: {self.by})"

    def save_body(self) -> str:
        return f"{self.name} by {self.by}"


@dataclass(eq=False, slots=True)
class Event(Task):
    start: str = ""
    end: str = ""

    kind = TaskType.EVENT

    def details(self) -> str:
        return f" (from: {self.start} to: {self.end})"

    def save_body(self) -> str:
        return f"{self.name} from {self.start} to {self.end}"
