# src/tasklark/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.messages import (
    DIVIDER,
    INTERNAL_ERROR_MESSAGE,
    MISSING_STORE_PROMPT,
    PROMPT_NOT_UNDERSTOOD_MESSAGE,
    STARTUP_FAILED_MESSAGE,
    STORE_CREATE_FAILED_MESSAGE,
    STORE_CREATED_MESSAGE,
    STORE_DECLINED_MESSAGE,
    WELCOME_MESSAGE,
)
from ..core.state import AppState
from ..tasks.task_store import NoSaveDataError

logger = logging.getLogger(__name__)

LineReader = Callable[[], str]


def _print_block(text: str) -> None:
    print(DIVIDER)
    print(text)
    print(DIVIDER, flush=True)


def _ask_create_store(state: AppState, read_line: LineReader) -> bool:
    """Ask until the user answers yes/no. Returns True if the session may continue."""
    print(MISSING_STORE_PROMPT, flush=True)
    while True:
        try:
            answer = read_line().strip().lower()
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed while asking to create the save file.")
            return False

        if answer in ("y", "yes"):
            return _create_store(state)
        if answer in ("n", "no"):
            _print_block(STORE_DECLINED_MESSAGE)
            return False
        print(PROMPT_NOT_UNDERSTOOD_MESSAGE, flush=True)


def _create_store(state: AppState) -> bool:
    try:
        state.store.create()
    except OSError:
        logger.exception("Failed to create save file %s", state.store.path)
        _print_block(STORE_CREATE_FAILED_MESSAGE)
        return False
    _print_block(STORE_CREATED_MESSAGE)
    return True


def load_saved_tasks(state: AppState, read_line: LineReader | None = None) -> bool:
    """
    Replay the save file into the task list.

    Returns False when the session must end (user declined to create a save
    file, or the store could not be read/created).
    """
    try:
        lines = state.store.load_lines()
    except NoSaveDataError:
        logger.info("No save data found at %s", state.store.path)
        if getattr(state.settings, "auto_create_store", False):
            return _create_store(state)
        return _ask_create_store(state, read_line or input)
    except OSError:
        logger.exception("Failed to read save file %s", state.store.path)
        print(STARTUP_FAILED_MESSAGE, flush=True)
        return False

    state.assistant.replay(lines)
    return True


def run_console_loop(state: AppState, read_line: LineReader | None = None) -> None:
    logger.info("Console connector started.")
    app_name = str(getattr(state.settings, "app_name", "lark"))
    assistant = state.assistant
    read_line = read_line or input

    _print_block(WELCOME_MESSAGE.format(app_name=app_name))

    while assistant.is_running:
        try:
            user_input = read_line()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input.strip():
            continue

        try:
            reply = assistant.respond(user_input)
        except Exception:
            logger.exception("Command handler crashed on input %r.", user_input)
            _print_block(INTERNAL_ERROR_MESSAGE)
            continue

        if reply.text:
            _print_block(reply.text)

    logger.info("Console connector finished.")
