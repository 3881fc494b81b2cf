# src/todo_app/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..ui.view import TaskListView

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[TaskListView, list[str]], str]
CommandHandler3 = Callable[[TaskListView, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

# "//text" is a task titled "/text", not a command.
ESCAPE_PREFIX = "//"


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /rm, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        view: TaskListView,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/") or line.startswith(ESCAPE_PREFIX):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(view, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(view, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  Any other text adds a new task (start it with // to add a title beginning with /).")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_positions(args: list[str]) -> list[int] | None:
    """1-based positions from command args; None if any arg is not a positive integer."""
    out: list[int] = []
    for a in args:
        for part in a.split(","):
            if not part:
                continue
            try:
                n = int(part)
            except ValueError:
                return None
            if n < 1:
                return None
            out.append(n)
    return out


def cmd_help(view: TaskListView, args: list[str], emit: CommandEmitter | None = None) -> str:
    return registry.build_help()


def cmd_list(view: TaskListView, args: list[str]) -> str:
    return view.render()


def cmd_status(view: TaskListView, args: list[str]) -> str:
    total = view.store.count()
    done = view.store.completed_count()
    return f"Status:\n  Tasks: {total}\n  Completed: {done}\n  Open: {total - done}"


def cmd_toggle(view: TaskListView, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /toggle N      -> flip completion of the task at position N
    /toggle N M    -> several at once
    """
    positions = _parse_positions(args)
    if not positions:
        return "Usage: /toggle N [N ...] (positions as shown by /list)."

    # Resolve ids first so earlier toggles cannot shift later positions.
    targets = [view.task_at(p) for p in positions]
    missing = [p for p, t in zip(positions, targets) if t is None]

    for task in targets:
        if task is not None:
            view.toggle(task.id)

    if missing and emit:
        emit(f"No task at position(s): {', '.join(map(str, missing))}.")

    flipped = sum(1 for t in targets if t is not None)
    return f"Toggled {flipped} task(s)."


def cmd_remove(view: TaskListView, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /rm N          -> delete the task at position N
    /rm N M ...    -> delete several in one update
    """
    positions = _parse_positions(args)
    if not positions:
        return "Usage: /rm N [N ...] (positions as shown by /list)."

    total = len(view.store.tasks)
    valid = {p - 1 for p in positions if p <= total}
    missing = sorted({p for p in positions if p > total})

    view.delete_at(valid)

    if missing and emit:
        emit(f"No task at position(s): {', '.join(map(str, missing))}.")

    return f"Removed {len(valid)} task(s)."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show task totals.")
registry.register(
    "toggle", cmd_toggle, help_text="Mark done/undone: /toggle N [N ...].", aliases=["done", "x"]
)
registry.register("rm", cmd_remove, help_text="Delete tasks: /rm N [N ...].", aliases=["del", "delete"])
