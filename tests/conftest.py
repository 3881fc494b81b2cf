# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_app.storage.preferences import PreferencesStore
from todo_app.tasks.task_store import TaskStore
from todo_app.ui.view import TaskListView

from .fakes import MemoryPreferences


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the console.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo",
        log_level="DEBUG",
        color=False,
        data_dir=tmp_path / "data",
        preferences_path=tmp_path / "data" / "preferences.json",
        tasks_key="tasksKey",
    )


@pytest.fixture()
def prefs() -> MemoryPreferences:
    return MemoryPreferences()


@pytest.fixture()
def file_prefs(tmp_path: Path) -> PreferencesStore:
    return PreferencesStore(tmp_path / "preferences.json")


@pytest.fixture()
def store(prefs: MemoryPreferences) -> TaskStore:
    return TaskStore(prefs)


@pytest.fixture()
def view(store: TaskStore) -> TaskListView:
    return TaskListView(store)
