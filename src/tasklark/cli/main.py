# src/tasklark/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, replays the save file, then runs the
console REPL until `bye` or end of input. The exit status is always 0.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import load_saved_tasks, run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    if load_saved_tasks(state):
        run_console_loop(state)

    logger.info("Bye.")


if __name__ == "__main__":
    main()
