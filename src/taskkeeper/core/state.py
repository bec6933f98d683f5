# src/taskkeeper/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..auth.service import AuthService
from ..auth.session import Session
from ..tasks.task_manager import TaskManager


@dataclass(slots=True)
class AppState:
    """Everything the terminal UI needs, wired once in cli/bootstrap.py."""

    # Settings (or a SimpleNamespace in tests).
    settings: Any

    session: Session
    auth: AuthService
    tasks: TaskManager
