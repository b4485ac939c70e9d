# src/tasklark/core/assistant.py

"""
Transport-agnostic front door.

Front ends (the console connector, or a chat window) only need two calls:
- `respond(text)` for one line of user input,
- `replay(lines)` once at startup with the saved lines.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..tasks.task_list import TaskList
from .parser import parse_input, parse_saved_line
from .ports import TaskRepo
from .router import CommandRouter, Reply

logger = logging.getLogger(__name__)


class Assistant:
    def __init__(self, task_list: TaskList, store: TaskRepo) -> None:
        self.task_list = task_list
        self.router = CommandRouter(task_list, store)
        self.is_running = True

    def respond(self, text: str) -> Reply:
        command = parse_input(text)
        if not command.command:
            return Reply()
        logger.debug("Handling command=%s args=%r", command.command, command.args)
        reply = self.router.handle(command)
        if reply.ends_session:
            self.is_running = False
        return reply

    def replay(self, lines: Iterable[str]) -> int:
        """Rebuild the task list from saved lines. Returns the number of tasks loaded."""
        before = len(self.task_list)
        for line in lines:
            try:
                command = parse_saved_line(line)
            except ValueError:
                logger.warning("Skipped unreadable save line: %r", line)
                continue
            self.router.handle(command, loading=True)
        loaded = len(self.task_list) - before
        logger.info("Replayed %d tasks.", loaded)
        return loaded
