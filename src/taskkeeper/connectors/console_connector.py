# src/taskkeeper/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.menus import ExitRequested, auth_menu, main_menu
from ..core.ports import Console
from ..core.state import AppState
from ..storage.codec import RecordParseError

logger = logging.getLogger(__name__)


class TerminalConsole:
    """Console port backed by input()/print()."""

    def ask(self, prompt: str) -> str:
        return input(prompt)

    def say(self, text: str) -> None:
        print(text, flush=True)


def run_console_loop(state: AppState, console: Console | None = None) -> None:
    """
    Menu loop: auth menu while logged out, task menu while logged in.

    Returns when the user picks Exit, or on EOF / Ctrl+C.
    """
    console = console or TerminalConsole()
    app_name = str(getattr(state.settings, "app_name", "taskkeeper"))

    logger.info("Console connector started.")
    console.say(f"{app_name}: task manager")

    while True:
        if state.auth.current_user is None:
            menu = auth_menu
            header = ""
        else:
            menu = main_menu
            header = f"User: {state.auth.current_user}\n"

        try:
            console.say(f"\n{header}{menu.build_menu()}")
            choice = console.ask("> ")
            response = menu.handle(state, choice, console)
        except ExitRequested:
            logger.info("Console exit command received.")
            break
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            console.say("")
            break
        except RecordParseError as e:
            logger.exception("Data file is corrupted.")
            console.say(f"Data file error: {e}")
            continue

        if response is not None:
            console.say(response)

    logger.info("Console connector finished.")
