# tests/test_bootstrap.py

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import SimpleNamespace

from todo_app.cli.bootstrap import create_initial_state
from todo_app.logging_setup import setup_logging


def test_initial_state_creates_dirs_and_empty_store(settings: SimpleNamespace) -> None:
    state = create_initial_state(settings=settings)

    assert settings.data_dir.is_dir()
    assert state.task_store.tasks == ()
    assert state.preferences.path == settings.preferences_path


def test_tasks_persist_between_launches(settings: SimpleNamespace) -> None:
    first = create_initial_state(settings=settings)
    milk = first.task_store.add("Buy milk")
    first.task_store.toggle_completion(milk.id)

    stored = json.loads(settings.preferences_path.read_text("utf-8"))
    assert json.loads(stored["tasksKey"]) == [{"id": milk.id, "title": "Buy milk", "isCompleted": True}]

    second = create_initial_state(settings=settings)
    assert [(t.id, t.is_completed) for t in second.task_store.tasks] == [(milk.id, True)]


def test_corrupt_preferences_file_starts_empty(settings: SimpleNamespace) -> None:
    settings.preferences_path.parent.mkdir(parents=True, exist_ok=True)
    settings.preferences_path.write_text("\x00garbage", "utf-8")

    state = create_initial_state(settings=settings)

    assert state.task_store.tasks == ()


def test_setup_logging_writes_log_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)
        logging.getLogger("todo_app.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in (tmp_path / "logs" / "todo.log").read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])
        logging.captureWarnings(False)


def test_console_filter_passes_app_logs_and_only_third_party_errors() -> None:
    from todo_app.logging_setup import _ConsoleNoiseFilter

    f = _ConsoleNoiseFilter()

    def rec(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    assert f.filter(rec("todo_app.tasks.task_store", logging.DEBUG))
    assert not f.filter(rec("py.warnings", logging.WARNING))
    assert not f.filter(rec("urllib3", logging.WARNING))
    assert f.filter(rec("urllib3", logging.ERROR))
