# src/taskkeeper/cli/menus.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import Console
from ..core.state import AppState
from ..tasks.task_models import Priority, Task, TaskStatus

MenuHandler = Callable[[AppState, Console], str | None]

logger = logging.getLogger(__name__)


class ExitRequested(Exception):
    """Raised by the exit entry; the console loop stops without confirmation."""


class MenuRegistry:
    """Numbered menu: choice key -> handler, in registration order."""

    def __init__(self) -> None:
        self._handlers: dict[str, MenuHandler] = {}
        self._labels: dict[str, str] = {}

    def register(
        self,
        key: str,
        handler: MenuHandler,
        label: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = key.strip().lower()
        self._handlers[key] = handler
        self._labels[key] = label
        for alias in aliases:
            self._handlers[alias.strip().lower()] = handler

    def handle(self, state: AppState, choice: str, console: Console) -> str | None:
        """
        Run the handler for `choice`.
        Returns text to print, or None (also for unknown choices: the menu is shown again).
        """
        handler = self._handlers.get(choice.strip().lower())
        if handler is None:
            logger.debug("Unknown menu choice %r", choice)
            return None
        return handler(state, console)

    def build_menu(self) -> str:
        return "\n".join(f"{key}. {label}" for key, label in self._labels.items())


def parse_priority(raw: str) -> Priority:
    # Anything other than 1/2 falls through to High.
    return {"1": Priority.LOW, "2": Priority.MEDIUM}.get(raw.strip(), Priority.HIGH)


def parse_status(raw: str) -> TaskStatus:
    return {"1": TaskStatus.NOT_STARTED, "2": TaskStatus.IN_PROGRESS}.get(
        raw.strip(), TaskStatus.DONE
    )


def parse_task_id(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def format_task(task: Task) -> str:
    return (
        f"ID: {task.id}\n"
        f"Title: {task.title}\n"
        f"Description: {task.description}\n"
        f"Priority: {task.priority.label}\n"
        f"Status: {task.status.label}\n"
    )


def format_tasks(tasks: list[Task]) -> str:
    if not tasks:
        return "No tasks"
    return "\n".join(format_task(t) for t in tasks)


# ---- auth menu ----


def cmd_login(state: AppState, console: Console) -> str:
    login = console.ask("Login: ")
    password = console.ask("Password: ")
    return "Logged in!" if state.auth.login(login, password) else "Login failed"


def cmd_register(state: AppState, console: Console) -> str:
    login = console.ask("New login: ")
    password = console.ask("Password: ")
    return "Registered!" if state.auth.register(login, password) else "Login is taken"


def cmd_exit(state: AppState, console: Console) -> str | None:
    raise ExitRequested()


# ---- main menu ----


def cmd_list(state: AppState, console: Console) -> str:
    return format_tasks(state.tasks.list_mine())


def cmd_add(state: AppState, console: Console) -> str:
    title = console.ask("Title: ")
    description = console.ask("Description: ")
    priority = parse_priority(console.ask("Priority (1-Low, 2-Medium, 3-High): "))
    state.tasks.add(title, description, priority)
    return "Task added!"


def cmd_edit(state: AppState, console: Console) -> str | None:
    console.say(cmd_list(state, console))
    task_id = parse_task_id(console.ask("Task ID: "))
    if task_id is None:
        return None

    title = console.ask("New title (Enter - keep): ")
    description = console.ask("New description (Enter - keep): ")

    priority: Priority | None = None
    if console.ask("Change priority? (y/n): ").strip().lower() == "y":
        priority = parse_priority(console.ask("Priority (1-3): "))

    status: TaskStatus | None = None
    if console.ask("Change status? (y/n): ").strip().lower() == "y":
        status = parse_status(console.ask("Status (1-Not started, 2-In progress, 3-Done): "))

    ok = state.tasks.update(task_id, title, description, priority, status)
    return "Updated!" if ok else "Error!"


def cmd_delete(state: AppState, console: Console) -> str | None:
    console.say(cmd_list(state, console))
    task_id = parse_task_id(console.ask("Task ID: "))
    if task_id is None:
        return None
    return "Deleted!" if state.tasks.delete(task_id) else "Error!"


def cmd_logout(state: AppState, console: Console) -> str | None:
    state.auth.logout()
    return None


auth_menu = MenuRegistry()
auth_menu.register("1", cmd_login, "Log in")
auth_menu.register("2", cmd_register, "Register")
auth_menu.register("3", cmd_exit, "Exit", aliases=["exit", "q"])

main_menu = MenuRegistry()
main_menu.register("1", cmd_list, "My tasks")
main_menu.register("2", cmd_add, "Add")
main_menu.register("3", cmd_edit, "Edit")
main_menu.register("4", cmd_delete, "Delete")
main_menu.register("5", cmd_logout, "Log out")
