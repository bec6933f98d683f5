# src/taskkeeper/auth/service.py

from __future__ import annotations

import logging

from ..core.ports import RecordRepo
from ..tasks.task_models import User
from .session import Session

logger = logging.getLogger(__name__)


class AuthService:
    """
    Registration and login against the users file.

    Passwords are compared as stored plaintext. This keeps users.txt
    compatible with existing data but offers no protection for the file.
    """

    def __init__(self, users: RecordRepo[User], session: Session) -> None:
        self._users = users
        self._session = session

    @property
    def current_user(self) -> str | None:
        return self._session.current_user

    def register(self, login: str, password: str) -> bool:
        """Create an account. Does not log it in. False if the login is taken."""
        users = self._users.load_all()
        if any(u.login == login for u in users):
            logger.info("Register rejected: login=%s already exists", login)
            return False

        users.append(User(login=login, password=password))
        self._users.save_all(users)
        logger.info("Registered login=%s total_users=%d", login, len(users))
        return True

    def login(self, login: str, password: str) -> bool:
        users = self._users.load_all()
        match = next(
            (u for u in users if u.login == login and u.password == password),
            None,
        )
        if match is None:
            logger.info("Login failed for login=%s", login)
            return False

        self._session.current_user = match.login
        logger.info("Logged in login=%s", match.login)
        return True

    def logout(self) -> None:
        if self._session.current_user is not None:
            logger.info("Logged out login=%s", self._session.current_user)
        self._session.clear()
