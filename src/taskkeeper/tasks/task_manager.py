# src/taskkeeper/tasks/task_manager.py

from __future__ import annotations

import logging
from dataclasses import replace

from ..auth.session import Session
from ..core.ports import RecordRepo
from .task_models import Priority, Task, TaskStatus

logger = logging.getLogger(__name__)

# tasks.txt has no null; a task added while logged out is stored with an empty owner.
NO_OWNER = ""


class TaskManager:
    """
    CRUD over tasks.txt, scoped to the session user.

    Stateless: each call loads the full task list, changes it in memory and
    writes it back. Session gating is the caller's job; here the session only
    decides which tasks are visible.
    """

    def __init__(self, tasks: RecordRepo[Task], session: Session) -> None:
        self._tasks = tasks
        self._session = session

    def _owner(self) -> str:
        user = self._session.current_user
        return NO_OWNER if user is None else user

    def _find_mine(self, tasks: list[Task], task_id: int) -> Task | None:
        user = self._session.current_user
        if user is None:
            return None
        return next((t for t in tasks if t.id == task_id and t.owner == user), None)

    def add(self, title: str, description: str, priority: Priority) -> int:
        """Append a NOT_STARTED task owned by the session user; return its id."""
        tasks = self._tasks.load_all()
        task_id = max((t.id for t in tasks), default=0) + 1
        owner = self._owner()

        tasks.append(
            Task(
                id=task_id,
                title=title,
                description=description,
                priority=priority,
                status=TaskStatus.NOT_STARTED,
                owner=owner,
            )
        )
        self._tasks.save_all(tasks)
        logger.info("Task added id=%s owner=%s priority=%s", task_id, owner, priority.name)
        return task_id

    def list_mine(self) -> list[Task]:
        user = self._session.current_user
        if user is None:
            return []
        return [t for t in self._tasks.load_all() if t.owner == user]

    def update(
        self,
        task_id: int,
        title: str | None = None,
        description: str | None = None,
        priority: Priority | None = None,
        status: TaskStatus | None = None,
    ) -> bool:
        """
        Change fields of one of the user's tasks.

        Empty/None title or description means "keep"; an empty string cannot
        clear a field. None priority/status means "keep". The updated record
        moves to the end of the file.
        """
        tasks = self._tasks.load_all()
        task = self._find_mine(tasks, task_id)
        if task is None:
            logger.debug("Update miss id=%s user=%s", task_id, self._session.current_user)
            return False

        tasks.remove(task)
        tasks.append(
            replace(
                task,
                title=title or task.title,
                description=description or task.description,
                priority=task.priority if priority is None else priority,
                status=task.status if status is None else status,
            )
        )
        self._tasks.save_all(tasks)
        logger.info("Task updated id=%s owner=%s", task_id, task.owner)
        return True

    def delete(self, task_id: int) -> bool:
        tasks = self._tasks.load_all()
        task = self._find_mine(tasks, task_id)
        if task is None:
            logger.debug("Delete miss id=%s user=%s", task_id, self._session.current_user)
            return False

        tasks.remove(task)
        self._tasks.save_all(tasks)
        logger.info("Task deleted id=%s owner=%s", task_id, task.owner)
        return True
