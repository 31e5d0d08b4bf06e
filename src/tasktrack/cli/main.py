# src/tasktrack/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console connector on an
asyncio event loop until /exit, EOF or Ctrl+C.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def _shutdown(state: AppState) -> None:
    """Best-effort shutdown: closing the HTTP client must not mask the exit reason."""
    try:
        await state.task_source.aclose()
    except Exception:
        logger.debug("Task source close failed.", exc_info=True)


async def _run(state: AppState) -> None:
    try:
        await run_console_loop(state)
    finally:
        await _shutdown(state)


def main() -> None:
    settings = get_settings()

    # The screen owns stdout; the console handler only shows problems.
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    file_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=logging.WARNING, file_level=file_level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        asyncio.run(_run(state))
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        print()
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
