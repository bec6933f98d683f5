# tests/test_record_store.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskkeeper.storage.codec import RecordParseError
from taskkeeper.storage.record_store import task_store, user_store
from taskkeeper.tasks.task_models import Priority, Task, TaskStatus, User


def _task(task_id: int, owner: str = "alice") -> Task:
    return Task(
        id=task_id,
        title=f"task {task_id}",
        description="",
        priority=Priority.LOW,
        status=TaskStatus.NOT_STARTED,
        owner=owner,
    )


def test_missing_file_is_empty(tmp_path: Path) -> None:
    store = user_store(tmp_path / "users.txt")
    assert store.load_all() == []
    assert not (tmp_path / "users.txt").exists()


def test_save_then_load_keeps_order(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    store = task_store(path)
    tasks = [_task(3), _task(1, owner="bob"), _task(2)]

    store.save_all(tasks)

    assert store.load_all() == tasks
    assert path.read_text("utf-8").splitlines() == [
        "3|task 3||Низкий|НеНачата|alice",
        "1|task 1||Низкий|НеНачата|bob",
        "2|task 2||Низкий|НеНачата|alice",
    ]


def test_save_overwrites_whole_file(tmp_path: Path) -> None:
    store = user_store(tmp_path / "users.txt")
    store.save_all([User("alice", "p1"), User("bob", "p2")])
    store.save_all([User("carol", "p3")])

    assert store.load_all() == [User("carol", "p3")]
    assert not (tmp_path / "users.txt.tmp").exists()


def test_save_creates_parent_dirs(tmp_path: Path) -> None:
    store = user_store(tmp_path / "nested" / "dir" / "users.txt")
    store.save_all([User("alice", "p1")])
    assert store.load_all() == [User("alice", "p1")]


def test_single_trailing_empty_line_is_tolerated(tmp_path: Path) -> None:
    path = tmp_path / "users.txt"
    path.write_text("alice|p1\r\nbob|p2\n\n", "utf-8")
    assert user_store(path).load_all() == [User("alice", "p1"), User("bob", "p2")]


def test_empty_file_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "users.txt"
    path.write_text("", "utf-8")
    assert user_store(path).load_all() == []


@pytest.mark.parametrize(
    "content, lineno",
    [
        ("1|a||Низкий|НеНачата|alice\n\n2|b||Низкий|НеНачата|alice\n", 2),
        ("1|a||Низкий|НеНачата|alice\n\n\n", 2),
        ("\n1|a||Низкий|НеНачата|alice\n", 1),
    ],
)
def test_blank_lines_inside_file_fail_load(tmp_path: Path, content: str, lineno: int) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text(content, "utf-8")

    with pytest.raises(RecordParseError) as exc:
        task_store(path).load_all()

    assert f":{lineno}:" in str(exc.value)


def test_leading_bom_is_dropped(tmp_path: Path) -> None:
    users = tmp_path / "users.txt"
    users.write_bytes("\ufeffalice|p1\n".encode("utf-8"))
    tasks = tmp_path / "tasks.txt"
    tasks.write_bytes("\ufeff1|t||Низкий|НеНачата|alice\n".encode("utf-8"))

    assert user_store(users).load_all() == [User("alice", "p1")]
    assert [t.id for t in task_store(tasks).load_all()] == [1]


def test_invalid_utf8_is_a_parse_error(tmp_path: Path) -> None:
    path = tmp_path / "users.txt"
    path.write_bytes(b"bob|p2\nalice|p\xff1\n")

    with pytest.raises(RecordParseError) as exc:
        user_store(path).load_all()

    assert ":2:" in str(exc.value)
    assert exc.value.line.startswith("alice|p")


def test_malformed_line_fails_whole_load(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text(
        "1|ok||Низкий|НеНачата|alice\n2|broken||Urgent|НеНачата|alice\n",
        "utf-8",
    )

    with pytest.raises(RecordParseError) as exc:
        task_store(path).load_all()

    assert ":2:" in str(exc.value)
    assert "Urgent" in exc.value.line
