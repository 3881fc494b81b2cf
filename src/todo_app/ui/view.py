# src/todo_app/ui/view.py

"""
Task list screen.

render_task_list() is a pure function of (tasks, draft): no I/O, no store access.
TaskListView owns the only UI state (the draft title), forwards affordances to the
store, and re-renders whenever the store or the draft changes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from ..core.ports import TaskRepo
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

RenderHook = Callable[[str], None]

_RESET = "\033[0m"
_BOLD_ITALIC = "\033[1;3m"
_YELLOW = "\033[33m"
_GREEN = "\033[32m"
_RED = "\033[31m"
_STRIKE = "\033[9m"

CHECKED = "[x]"
UNCHECKED = "[ ]"
ADD_MARK = "[+]"
DELETE_MARK = "[del]"


def _paint(text: str, code: str, color: bool) -> str:
    return f"{code}{text}{_RESET}" if color else text


def _strike(text: str, color: bool) -> str:
    if color:
        return f"{_STRIKE}{text}{_RESET}"
    # Plain terminals: combining long stroke overlay on every character.
    return "".join(ch + "\u0336" for ch in text)


def render_row(position: int, task: Task, *, color: bool = False) -> str:
    """One list row: 1-based position, completion mark, title, delete hint."""
    if task.is_completed:
        mark = _paint(CHECKED, _GREEN, color)
        title = _strike(task.title, color)
    else:
        mark = UNCHECKED
        title = task.title
    delete = _paint(DELETE_MARK, _RED, color)
    return f"{position:>3}. {mark} {title}  {delete}"


def render_task_list(
    tasks: Sequence[Task],
    draft: str = "",
    *,
    title: str = "",
    color: bool = False,
) -> str:
    lines: list[str] = []
    if title:
        lines.append(_paint(title, _BOLD_ITALIC, color))
        lines.append("")

    lines.append(f"{_paint(ADD_MARK, _YELLOW, color)} > {draft}")
    lines.append("")

    if not tasks:
        lines.append("  (no tasks)")
    for i, task in enumerate(tasks, start=1):
        lines.append(render_row(i, task, color=color))

    return "\n".join(lines)


class TaskListView:
    """Presentation layer bound to one task store."""

    def __init__(
        self,
        store: TaskRepo,
        *,
        title: str = "",
        color: bool = False,
        on_change: RenderHook | None = None,
    ) -> None:
        self._store = store
        self._title = title
        self._color = color
        self._draft = ""
        self._on_change = on_change
        self._unsubscribe = store.subscribe(lambda _store: self._rerender())

    @property
    def draft(self) -> str:
        return self._draft

    @property
    def store(self) -> TaskRepo:
        return self._store

    def render(self) -> str:
        return render_task_list(self._store.tasks, self._draft, title=self._title, color=self._color)

    def _rerender(self) -> None:
        if self._on_change is None:
            return
        self._on_change(self.render())

    def set_render_hook(self, hook: RenderHook | None) -> RenderHook | None:
        """Replace the re-render hook; returns the previous one."""
        previous, self._on_change = self._on_change, hook
        return previous

    def close(self) -> None:
        """Stop listening to the store."""
        self._unsubscribe()

    # ---- affordances ----

    def set_draft(self, text: str) -> None:
        if text == self._draft:
            return
        self._draft = text
        self._rerender()

    def submit(self) -> Task | None:
        """Append the draft as a new task and clear it. Empty drafts are rejected."""
        if not self._draft:
            logger.debug("Rejected empty task title.")
            return None
        task = self._store.add(self._draft)
        self.set_draft("")
        return task

    def toggle(self, task_id: str) -> None:
        self._store.toggle_completion(task_id)

    def delete(self, task_id: str) -> None:
        """Delete the row showing task_id (resolved to its current index)."""
        idx = self._store.index_of(task_id)
        if idx is None:
            return
        self._store.remove({idx})

    def delete_at(self, positions: Iterable[int]) -> None:
        self._store.remove(positions)

    def task_at(self, position: int) -> Task | None:
        """Task shown at 1-based position, or None."""
        tasks = self._store.tasks
        if 1 <= position <= len(tasks):
            return tasks[position - 1]
        return None
