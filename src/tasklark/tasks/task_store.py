# src/tasklark/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)


class NoSaveDataError(FileNotFoundError):
    """Raised when the save file does not exist yet."""


class TaskFileStore:
    """
    Flat text task store: one task per line, `<tag> | <X or blank> | <body>`.

    Every save rewrites the whole file from the current task list.
    The store never creates the file on its own; `create()` must be called
    explicitly (the console asks the user first).
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load_lines(self) -> list[str]:
        if not self.exists():
            raise NoSaveDataError(f"No save data found at {self._path}")
        text = self._path.read_text("utf-8")
        lines = [ln for ln in text.splitlines() if ln.strip()]
        logger.info("Loaded %d saved task lines from %s", len(lines), self._path)
        return lines

    def save(self, tasks: Iterable[Task]) -> None:
        lines = [t.to_save_line() for t in tasks]
        content = "\n".join(lines) + ("\n" if lines else "")
        self._path.write_text(content, "utf-8")
        logger.debug("Saved %d tasks to %s", len(lines), self._path)

    def create(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.touch(exist_ok=True)
        logger.info("Created empty save file %s", self._path)
