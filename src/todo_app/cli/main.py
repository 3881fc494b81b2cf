# src/todo_app/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the task list console in the
main thread until /exit, EOF or Ctrl+C.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..logging_setup import setup_logging
from ..ui.console import run_console_loop
from ..ui.view import TaskListView

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    view = TaskListView(state.task_store, title=settings.app_name, color=settings.color)

    try:
        run_console_loop(view)
    finally:
        # Every mutation is already on disk; nothing to flush.
        view.close()
        logger.info("Bye.")


if __name__ == "__main__":
    main()
