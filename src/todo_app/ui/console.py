# src/todo_app/ui/console.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import ESCAPE_PREFIX
from ..cli.commands import registry as command_registry
from .view import TaskListView

logger = logging.getLogger(__name__)

PROMPT = ">>> New task: "


def run_console_loop(
    view: TaskListView,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Interactive loop: plain text adds a task; /commands toggle, delete and list tasks.

    Renders requested while handling one line are coalesced: the screen is
    printed once, after the line is handled.
    """
    logger.info("Console started (tasks=%d).", len(view.store.tasks))

    pending: list[str] = []
    previous_hook = view.set_render_hook(pending.append)

    write("[CONSOLE] Type a task and press Enter to add it. Use /help for commands. Use /exit to quit.\n")
    write(view.render())

    try:
        while True:
            try:
                user_input = read_line(PROMPT).strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                write("")
                break

            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            pending.clear()

            # Commands (/help, /rm, ...)
            try:
                cmd_response = command_registry.handle(view, user_input, emit=write)
            except Exception:
                logger.exception("Command handler crashed.")
                cmd_response = "Internal error while handling a command."

            # Anything else is the text field: append-then-clear.
            if cmd_response is None:
                title = user_input[1:] if user_input.startswith(ESCAPE_PREFIX) else user_input
                view.set_draft(title)
                view.submit()

            if pending:
                write(pending[-1])
            if cmd_response is not None and cmd_response not in pending:
                write(cmd_response)
    finally:
        view.set_render_hook(previous_hook)

    logger.info("Console finished.")
