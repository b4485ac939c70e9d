# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklark.core.assistant import Assistant
from tasklark.core.router import CommandRouter
from tasklark.core.state import AppState
from tasklark.tasks.task_list import TaskList
from tasklark.tasks.task_store import TaskFileStore

from .fakes import FakeTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console connector.

    A SimpleNamespace keeps unit tests away from the real environment.
    """
    return SimpleNamespace(
        app_name="lark",
        log_level="WARNING",
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.txt",
        log_dir=tmp_path,
        auto_create_store=False,
    )


@pytest.fixture()
def repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def task_list() -> TaskList:
    return TaskList()


@pytest.fixture()
def router(task_list: TaskList, repo: FakeTaskRepo) -> CommandRouter:
    return CommandRouter(task_list, repo)


@pytest.fixture()
def assistant(task_list: TaskList, repo: FakeTaskRepo) -> Assistant:
    return Assistant(task_list, repo)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired with the real file store in tmp_path.

    The file store's line format is part of what we want to test.
    """
    store = TaskFileStore(settings.tasks_path)
    return AppState(settings=settings, store=store, assistant=Assistant(TaskList(), store))
