# src/tasklark/core/parser.py

"""
Turn raw text into `Command` values.

Two input shapes exist:
- live input typed by the user: `deadline return book /by Sunday`
- saved lines replayed at startup: `D |   | return book by Sunday`
"""

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import TaskType

DONE_MARK = "X"


@dataclass(frozen=True, slots=True)
class Command:
    command: str
    args: str = ""
    mark: str = ""

    @property
    def is_marked(self) -> bool:
        return self.mark.strip().upper() == DONE_MARK


def parse_input(line: str) -> Command:
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return Command(command="")
    name = parts[0].lower()
    args = parts[1].strip() if len(parts) > 1 else ""
    return Command(command=name, args=args)


def parse_saved_line(line: str) -> Command:
    fields = [f.strip() for f in line.split("|", 2)]
    if len(fields) < 3:
        raise ValueError(f"Malformed save line: {line!r}")
    tag, mark, body = fields
    task_type = TaskType.from_tag(tag)
    return Command(command=task_type.value if task_type else tag, args=body, mark=mark)
