# src/tasklark/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The router depends on these Protocols instead of the concrete file store,
which keeps storage swappable and lets tests record saves in memory.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Persistence collaborator: full rewrite of the stored task list."""

    def save(self, tasks: Iterable[Task]) -> None: ...
