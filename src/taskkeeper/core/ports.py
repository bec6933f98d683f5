# src/taskkeeper/core/ports.py

"""
Ports (interfaces) used by the core.

AuthService and TaskManager depend on RecordRepo instead of the concrete
file store, so tests can swap in an in-memory repo. Menu handlers talk to
the terminal through Console, so tests can script the input.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar

R = TypeVar("R")


class RecordRepo(Protocol[R]):
    """Whole-collection storage: every call reads or rewrites everything."""

    def load_all(self) -> list[R]: ...

    def save_all(self, records: Sequence[R]) -> None: ...


class Console(Protocol):
    """Line-oriented terminal: read one answer, print one block of text."""

    def ask(self, prompt: str) -> str: ...

    def say(self, text: str) -> None: ...
