# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskkeeper.auth.service import AuthService
from taskkeeper.auth.session import Session
from taskkeeper.cli.bootstrap import create_initial_state
from taskkeeper.core.state import AppState
from taskkeeper.tasks.task_manager import TaskManager
from taskkeeper.tasks.task_models import Task, User

from .fakes import InMemoryRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with create_initial_state.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskkeeper-test",
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        data_dir=tmp_path,
        users_path=tmp_path / "users.txt",
        tasks_path=tmp_path / "tasks.txt",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired with the real file stores under tmp_path."""
    return create_initial_state(settings=settings)


@pytest.fixture()
def session() -> Session:
    return Session()


@pytest.fixture()
def user_repo() -> InMemoryRepo[User]:
    return InMemoryRepo()


@pytest.fixture()
def task_repo() -> InMemoryRepo[Task]:
    return InMemoryRepo()


@pytest.fixture()
def auth(user_repo: InMemoryRepo[User], session: Session) -> AuthService:
    return AuthService(user_repo, session)


@pytest.fixture()
def manager(task_repo: InMemoryRepo[Task], session: Session) -> TaskManager:
    return TaskManager(task_repo, session)
