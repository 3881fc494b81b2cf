# src/todo_app/tasks/task_models.py

from __future__ import annotations

import json
import uuid
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


class TaskDecodeError(ValueError):
    """Persisted payload could not be turned into a task list."""


def new_task_id() -> str:
    """Random 128-bit id in canonical upper-case form."""
    return str(uuid.uuid4()).upper()


@dataclass(slots=True)
class Task:
    id: str
    title: str
    is_completed: bool = False

    @classmethod
    def create(cls, title: str) -> Task:
        return cls(id=new_task_id(), title=title)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "isCompleted": self.is_completed}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise TaskDecodeError(f"task entry must be an object, got {type(raw).__name__}")

        raw_id = raw.get("id")
        if not isinstance(raw_id, str):
            raise TaskDecodeError("task entry is missing a string 'id'")
        try:
            task_id = str(uuid.UUID(raw_id)).upper()
        except ValueError as e:
            raise TaskDecodeError(f"task id is not a UUID: {raw_id!r}") from e

        title = raw.get("title")
        if not isinstance(title, str):
            raise TaskDecodeError(f"task {task_id} is missing a string 'title'")

        # isCompleted has a default; anything present must be a real boolean.
        done = raw.get("isCompleted", False)
        if not isinstance(done, bool):
            raise TaskDecodeError(f"task {task_id} has a non-boolean 'isCompleted'")

        return cls(id=task_id, title=title, is_completed=done)


def encode_tasks(tasks: Iterable[Task]) -> str:
    """Serialize the whole sequence as a JSON array of {id, title, isCompleted}."""
    return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)


def decode_tasks(payload: str | bytes) -> list[Task]:
    """
    Parse a payload produced by encode_tasks().

    All-or-nothing: a single malformed entry makes the whole payload undecodable.
    """
    try:
        data = json.loads(payload)
    except (TypeError, ValueError, RecursionError) as e:
        raise TaskDecodeError(f"payload is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise TaskDecodeError(f"payload must be a JSON array, got {type(data).__name__}")

    return [Task.from_dict(item) for item in data]
