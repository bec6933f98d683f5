# src/taskkeeper/storage/codec.py

"""
Line codec for users.txt / tasks.txt.

One record per line, fields joined by DELIMITER, positional, no escaping.
A field that itself contains the delimiter cannot be round-tripped; that is a
known limitation of the file format and is not guarded here.
"""

from __future__ import annotations

from ..tasks.task_models import Priority, Task, TaskStatus, User

DELIMITER = "|"

_USER_FIELDS = 2
_TASK_FIELDS = 6


class RecordParseError(ValueError):
    """A stored line could not be decoded into a record."""

    def __init__(self, message: str, *, line: str) -> None:
        super().__init__(message)
        self.line = line


def _split(line: str, expected: int, kind: str) -> list[str]:
    parts = line.rstrip("\r\n").split(DELIMITER)
    if len(parts) != expected:
        raise RecordParseError(
            f"{kind} record needs {expected} fields, got {len(parts)}", line=line
        )
    return parts


def encode_user(user: User) -> str:
    return DELIMITER.join((user.login, user.password))


def decode_user(line: str) -> User:
    login, password = _split(line, _USER_FIELDS, "user")
    return User(login=login, password=password)


def encode_task(task: Task) -> str:
    return DELIMITER.join(
        (
            str(task.id),
            task.title,
            task.description,
            task.priority.value,
            task.status.value,
            task.owner,
        )
    )


def decode_task(line: str) -> Task:
    raw_id, title, description, raw_priority, raw_status, owner = _split(
        line, _TASK_FIELDS, "task"
    )

    try:
        task_id = int(raw_id)
    except ValueError:
        raise RecordParseError(f"invalid task id {raw_id!r}", line=line) from None

    try:
        priority = Priority(raw_priority)
    except ValueError:
        raise RecordParseError(f"unknown priority {raw_priority!r}", line=line) from None

    try:
        status = TaskStatus(raw_status)
    except ValueError:
        raise RecordParseError(f"unknown status {raw_status!r}", line=line) from None

    return Task(
        id=task_id,
        title=title,
        description=description,
        priority=priority,
        status=status,
        owner=owner,
    )
