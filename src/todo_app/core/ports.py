# src/todo_app/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task store and the UI.

The store depends on a Protocol instead of the concrete preferences file.
This keeps storage swappable and makes testing easier.
"""

from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class PreferenceSlots(Protocol):
    """Key-value storage holding text values (PreferencesStore, or an in-memory fake)."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class TaskRepo(Protocol):
    """What the presentation layer needs from the task store."""

    @property
    def tasks(self) -> Sequence[Task]: ...

    def add(self, title: str) -> Task: ...

    def remove(self, positions: Iterable[int]) -> None: ...

    def toggle_completion(self, task_id: str) -> None: ...

    def index_of(self, task_id: str) -> int | None: ...

    def count(self) -> int: ...

    def completed_count(self) -> int: ...

    def subscribe(self, callback: Callable[[TaskRepo], None]) -> Callable[[], None]: ...
