# src/tasktrack/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
import shutil
import sys
import threading
from collections.abc import Awaitable, Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..navigation.navigator import NavigationError
from ..screens.host import ScreenHost, default_screen_factory
from ..screens.theme import Theme

logger = logging.getLogger(__name__)

PROMPT = "> "
MAX_WIDTH = 72

LineReader = Callable[[], Awaitable[str | None]]


def _clear_screen() -> None:
    """Best-effort: only clear a real terminal."""
    try:
        if sys.stdout.isatty():
            sys.stdout.write("\033[H\033[2J\033[3J")
            sys.stdout.flush()
    except (AttributeError, ValueError):
        pass


class StdinReader:
    """
    Reads stdin lines on a daemon thread and hands them to the event loop.

    input() blocks; keeping it off the loop lets focus refreshes run while the
    user types, and a daemon thread never holds up interpreter exit.
    EOF (or Ctrl+D) is delivered as None. The prompt is printed by the redraw.
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue[str | None] = asyncio.Queue()
        self._loop = asyncio.get_running_loop()
        self._thread = threading.Thread(target=self._run, name="tasktrack-stdin", daemon=True)
        self._thread.start()

    def _run(self) -> None:
        while True:
            try:
                line: str | None = input()
            except EOFError:
                line = None
            except (OSError, ValueError):
                logger.debug("stdin closed.", exc_info=True)
                line = None
            self._loop.call_soon_threadsafe(self._queue.put_nowait, line)
            if line is None:
                return

    async def __call__(self) -> str | None:
        return await self._queue.get()


async def run_console_loop(
    state: AppState,
    *,
    read_line: LineReader | None = None,
    theme: Theme | None = None,
    width: int | None = None,
) -> None:
    settings = state.settings
    if theme is None:
        theme = Theme.detect(str(getattr(settings, "primary_color", "#2563EB")))
    if width is None:
        width = min(MAX_WIDTH, shutil.get_terminal_size((80, 24)).columns - 2)

    message: list[str] = []

    def redraw() -> None:
        _clear_screen()
        for line in host.current.lines(theme, width):
            print(line)
        if state.offline:
            print(theme.faint("(offline demo data)"))
        for line in message:
            print(line)
        # Every redraw ends with the prompt; the reader thread itself prints none.
        print(PROMPT, end="", flush=True)

    host = ScreenHost(state.navigator, default_screen_factory(state), on_change=redraw)
    state.host = host

    logger.info("Console connector started (source=%s).", "offline" if state.offline else "remote")
    host.start()
    redraw()

    if read_line is None:
        read_line = StdinReader()

    try:
        while True:
            raw = await read_line()

            if raw is None:
                logger.info("Console EOF received, exiting.")
                break

            user_input = raw.strip()
            message.clear()
            if not user_input:
                redraw()
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            try:
                if user_input.startswith("/"):
                    reply = command_registry.handle(state, user_input)
                else:
                    reply = host.current.handle_input(user_input)
            except NavigationError:
                raise
            except Exception:
                logger.exception("Input handler crashed.")
                reply = "Internal error while handling input."

            if reply:
                message.extend(reply.splitlines())
            redraw()
    finally:
        host.stop()
        state.host = None
        logger.info("Console connector finished.")
