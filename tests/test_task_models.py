# tests/test_task_models.py

from __future__ import annotations

import json
import uuid

import pytest

from todo_app.tasks.task_models import Task, TaskDecodeError, decode_tasks, encode_tasks


def test_new_task_defaults_and_id_format() -> None:
    t = Task.create("Buy milk")
    assert t.title == "Buy milk"
    assert t.is_completed is False
    assert t.id == t.id.upper()
    assert str(uuid.UUID(t.id)).upper() == t.id


def test_ids_are_unique() -> None:
    ids = {Task.create("x").id for _ in range(200)}
    assert len(ids) == 200


def test_wire_format_field_names() -> None:
    t = Task(id="E621E1F8-C36C-495A-93FC-0C247A3E6E5F", title="Walk dog", is_completed=True)
    data = json.loads(encode_tasks([t]))
    assert data == [
        {"id": "E621E1F8-C36C-495A-93FC-0C247A3E6E5F", "title": "Walk dog", "isCompleted": True}
    ]


@pytest.mark.parametrize("count", [0, 1, 5])
def test_encode_decode_round_trip(count: int) -> None:
    tasks = [Task.create(f"task {i}") for i in range(count)]
    if tasks:
        tasks[0].is_completed = True
    assert decode_tasks(encode_tasks(tasks)) == tasks


def test_round_trip_keeps_unicode_and_empty_titles() -> None:
    tasks = [Task.create("купить молоко ☕"), Task.create("")]
    assert decode_tasks(encode_tasks(tasks)) == tasks


def test_decode_accepts_bytes_and_lowercase_ids() -> None:
    raw = json.dumps([{"id": "e621e1f8-c36c-495a-93fc-0c247a3e6e5f", "title": "a", "isCompleted": False}])
    (t,) = decode_tasks(raw.encode("utf-8"))
    assert t.id == "E621E1F8-C36C-495A-93FC-0C247A3E6E5F"


def test_missing_is_completed_defaults_to_false() -> None:
    raw = json.dumps([{"id": str(uuid.uuid4()), "title": "a"}])
    (t,) = decode_tasks(raw)
    assert t.is_completed is False


@pytest.mark.parametrize(
    "payload",
    [
        "",
        "not json",
        "{}",
        '"tasks"',
        "[1]",
        '[{"title": "no id"}]',
        '[{"id": "not-a-uuid", "title": "a"}]',
        '[{"id": "E621E1F8-C36C-495A-93FC-0C247A3E6E5F"}]',
        '[{"id": "E621E1F8-C36C-495A-93FC-0C247A3E6E5F", "title": 3}]',
        '[{"id": "E621E1F8-C36C-495A-93FC-0C247A3E6E5F", "title": "a", "isCompleted": "yes"}]',
    ],
)
def test_malformed_payloads_are_rejected(payload: str) -> None:
    with pytest.raises(TaskDecodeError):
        decode_tasks(payload)


def test_one_bad_entry_rejects_the_whole_payload() -> None:
    good = Task.create("fine").to_dict()
    with pytest.raises(TaskDecodeError):
        decode_tasks(json.dumps([good, {"id": 1, "title": "bad"}]))


def test_deeply_nested_payload_is_undecodable() -> None:
    with pytest.raises(TaskDecodeError):
        decode_tasks("[" * 200000)
