# src/taskbook/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (opens the task database), then runs the
console REPL in the main thread.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state, shutdown_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.errors import StorageUnavailable

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    console_level = getattr(logging, str(settings.log_level).upper(), logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except StorageUnavailable:
        logger.exception("Task database unavailable at %s.", settings.tasks_db_path)
        return 1

    try:
        run_console_loop(state)
    finally:
        shutdown_state(state)
        logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
