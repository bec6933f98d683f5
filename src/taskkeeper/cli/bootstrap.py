# src/taskkeeper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds one store per data file,
- shares one Session between AuthService and TaskManager.
"""

from __future__ import annotations

import logging

from ..auth.service import AuthService
from ..auth.session import Session
from ..config import get_settings
from ..core.state import AppState
from ..storage.record_store import task_store, user_store
from ..tasks.task_manager import TaskManager

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    session = Session()
    state = AppState(
        settings=settings,
        session=session,
        auth=AuthService(user_store(settings.users_path), session),
        tasks=TaskManager(task_store(settings.tasks_path), session),
    )
    logger.info("State ready users=%s tasks=%s", settings.users_path, settings.tasks_path)
    return state
