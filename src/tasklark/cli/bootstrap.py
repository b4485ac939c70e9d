# src/tasklark/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the file store, task list and assistant into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.assistant import Assistant
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskFileStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings stay injectable so tests can point the store at a tmp directory.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskFileStore(settings.tasks_path)
    assistant = Assistant(TaskList(), store)
    logger.debug("State ready tasks_path=%s", settings.tasks_path)
    return AppState(settings=settings, store=store, assistant=assistant)
