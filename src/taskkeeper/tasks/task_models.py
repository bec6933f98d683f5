# src/taskkeeper/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Priority(StrEnum):
    """
    Task priority.

    Values are the tags written to tasks.txt; they must stay byte-identical
    so existing data files keep loading.
    """

    LOW = "Низкий"
    MEDIUM = "Средний"
    HIGH = "Высокий"

    @property
    def label(self) -> str:
        return _PRIORITY_LABELS[self]


class TaskStatus(StrEnum):
    """Task lifecycle status (stored tags, see Priority)."""

    NOT_STARTED = "НеНачата"
    IN_PROGRESS = "ВПроцессе"
    DONE = "Завершена"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_PRIORITY_LABELS = {
    Priority.LOW: "Low",
    Priority.MEDIUM: "Medium",
    Priority.HIGH: "High",
}

_STATUS_LABELS = {
    TaskStatus.NOT_STARTED: "Not started",
    TaskStatus.IN_PROGRESS: "In progress",
    TaskStatus.DONE: "Done",
}


@dataclass(frozen=True, slots=True)
class User:
    login: str
    # Plaintext: users.txt stores and compares the password verbatim.
    password: str


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    title: str
    description: str
    priority: Priority
    status: TaskStatus
    owner: str
