# src/todo_cli/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "> "
QUIT_COMMANDS = ("quit", "q")


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Read one command per line until quit, EOF or Ctrl+C.

    `read_line` and `write` default to input/print; tests pass fakes.
    """
    logger.info("Console connector started (tasks=%d).", len(state.task_store))
    write("\nWelcome to the TODO CLI project\n")
    write(command_registry.handle(state, "help") or "")

    while True:
        try:
            user_input = read_line(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        if user_input.split()[0].lower() in QUIT_COMMANDS:
            logger.info("Console quit command received.")
            write("Goodbye!")
            break

        try:
            reply = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            write(reply)

    logger.info("Console connector finished.")
