# src/todo_app/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..core.ports import PreferenceSlots
from .task_models import Task, TaskDecodeError, decode_tasks, encode_tasks

logger = logging.getLogger(__name__)

DEFAULT_TASKS_KEY = "tasksKey"

StoreObserver = Callable[["TaskStore"], None]


class TaskStore:
    """
    In-memory ordered task list backed by one preferences slot.

    Persistence is whole-value:
    - load once at construction (missing/undecodable -> empty list)
    - after every effective mutation, encode the full list and overwrite the slot

    Neither failure is raised: both are logged and the store stays usable.
    Observers registered with subscribe() are called after each effective mutation.
    """

    def __init__(self, preferences: PreferenceSlots, key: str = DEFAULT_TASKS_KEY) -> None:
        self._preferences = preferences
        self._key = key
        self._tasks: list[Task] = []
        self._observers: list[StoreObserver] = []
        self.load()
        logger.info("TaskStore ready key=%s total=%d", self._key, len(self._tasks))

    # ---- persistence ----

    def load(self) -> None:
        """Replace the in-memory list with whatever the slot decodes to."""
        try:
            raw = self._preferences.get(self._key)
        except Exception:
            logger.warning("Failed to read slot %s; starting empty.", self._key, exc_info=True)
            self._tasks = []
            return

        if raw is None:
            self._tasks = []
            return

        try:
            self._tasks = decode_tasks(raw)
        except TaskDecodeError as e:
            logger.warning("Stored tasks under %s are undecodable (%s); starting empty.", self._key, e)
            self._tasks = []

    def save(self) -> None:
        """Encode the whole list and overwrite the slot. Failures leave the prior value in place."""
        try:
            payload = encode_tasks(self._tasks)
        except (TypeError, ValueError):
            logger.warning("Failed to encode %d tasks; slot left unchanged.", len(self._tasks), exc_info=True)
            return

        try:
            self._preferences.set(self._key, payload)
        except Exception:
            logger.warning("Failed to write slot %s; change kept in memory only.", self._key, exc_info=True)
            return

        logger.debug("Tasks saved key=%s count=%d", self._key, len(self._tasks))

    def _changed(self) -> None:
        self.save()
        for callback in list(self._observers):
            try:
                callback(self)
            except Exception:
                logger.exception("TaskStore observer %r failed.", callback)

    # ---- observers ----

    def subscribe(self, callback: StoreObserver) -> Callable[[], None]:
        """Register callback(store) for change notifications. Returns an unsubscribe function."""
        self._observers.append(callback)

        def unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    # ---- read API ----

    @property
    def key(self) -> str:
        return self._key

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def count(self) -> int:
        return len(self._tasks)

    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.is_completed)

    def index_of(self, task_id: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def get(self, task_id: str) -> Task | None:
        idx = self.index_of(task_id)
        return self._tasks[idx] if idx is not None else None

    # ---- mutations ----

    def add(self, title: str) -> Task:
        """Append a new, not-completed task. Title validation is the caller's job."""
        task = Task.create(title)
        self._tasks.append(task)
        logger.debug("Task added id=%s index=%d", task.id, len(self._tasks) - 1)
        self._changed()
        return task

    def remove(self, positions: Iterable[int]) -> None:
        """Delete the tasks at the given current indices. Out-of-range indices are ignored."""
        n = len(self._tasks)
        drop = {int(p) for p in positions if 0 <= int(p) < n}
        if not drop:
            return
        self._tasks = [t for i, t in enumerate(self._tasks) if i not in drop]
        logger.debug("Tasks removed positions=%s remaining=%d", sorted(drop), len(self._tasks))
        self._changed()

    def toggle_completion(self, task_id: str) -> None:
        """Flip is_completed on the first task with task_id. Unknown ids are ignored."""
        idx = self.index_of(task_id)
        if idx is None:
            return
        task = self._tasks[idx]
        task.is_completed = not task.is_completed
        logger.debug("Task toggled id=%s completed=%s", task.id, task.is_completed)
        self._changed()
