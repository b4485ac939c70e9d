# src/tasklark/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskFileStore
from .assistant import Assistant


@dataclass
class AppState:
    # Settings live on the state so connectors do not read config globally.
    settings: object

    store: TaskFileStore
    assistant: Assistant
