# src/todo_app/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..storage.preferences import PreferencesStore
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings (or a test SimpleNamespace) kept on the state for easy access.
    settings: Any

    preferences: PreferencesStore
    task_store: TaskStore
