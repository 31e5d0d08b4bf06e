# src/tasktrack/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..navigation.navigator import Route
from ..screens.task_list.screen import TaskListScreen

CommandHandler = Callable[[AppState, list[str]], str | None]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /back, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string, or None if it was not a command or the command has nothing to say.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _list_screen(state: AppState) -> TaskListScreen | None:
    host = state.host
    if host is None:
        return None
    screen = host.current
    return screen if isinstance(screen, TaskListScreen) else None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_back(state: AppState, args: list[str]) -> str | None:
    if not state.navigator.go_back():
        return "Already on the task list."
    return None


def cmd_add(state: AppState, args: list[str]) -> str | None:
    screen = _list_screen(state)
    if screen is None:
        return "New tasks can only be started from the task list."
    screen.create_task()
    return None


def cmd_open(state: AppState, args: list[str]) -> str | None:
    """
    /open <n>  -> open row n of the task list
    """
    if len(args) != 1 or not args[0].isdecimal():
        return "Usage: /open <task number>"
    screen = _list_screen(state)
    if screen is None:
        return "Tasks can only be opened from the task list."
    return screen.handle_input(args[0])


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    source = "offline demo" if state.offline else str(getattr(state.task_source, "url", "remote"))
    route = state.navigator.current
    where = route.route.value
    if route.route == Route.DETAIL:
        where += f" (id={route.params['id']})"
    return (
        "Status:\n"
        f"  Task source: {source}\n"
        f"  Screen: {where}\n"
        f"  Log file: {getattr(settings, 'log_file', '?')}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("open", cmd_open, help_text="Open a task from the list: /open <n>.")
registry.register("add", cmd_add, help_text="Start a new task (from the list).", aliases=["new"])
registry.register("back", cmd_back, help_text="Return to the previous screen.", aliases=["b"])
registry.register("status", cmd_status, help_text="Show task source, current screen and log file.")
