# src/taskkeeper/auth/session.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Session:
    """
    Who is logged in.

    Passed by reference into AuthService and TaskManager so both see the same
    login; a test can hand TaskManager a Session with a fixed user.
    """

    current_user: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def clear(self) -> None:
        self.current_user = None
