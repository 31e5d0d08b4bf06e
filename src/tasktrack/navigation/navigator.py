# src/tasktrack/navigation/navigator.py

"""
Stack navigator for the three app routes.

Route contract:
- list_tasks: initial route, no parameters
- add_task:   no parameters
- task_detail: exactly one parameter, "id" (non-empty string)

Anything else raises NavigationError at the call site. That is a programming
error: callers do not catch it.

Focus subscriptions are level-triggered: a callback fires every time an entry
of its route becomes the top of the stack, and once on subscribe if the route
is already on top.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

logger = logging.getLogger(__name__)


class Route(StrEnum):
    LIST = "list_tasks"
    ADD = "add_task"
    DETAIL = "task_detail"


INITIAL_ROUTE = Route.LIST

ROUTE_PARAMS: Mapping[Route, frozenset[str]] = MappingProxyType(
    {
        Route.LIST: frozenset(),
        Route.ADD: frozenset(),
        Route.DETAIL: frozenset({"id"}),
    }
)


class NavigationError(Exception):
    """Unknown route or wrong route parameters."""


@dataclass(frozen=True, slots=True)
class RouteEntry:
    key: int
    route: Route
    params: Mapping[str, str] = field(default_factory=dict)


FocusCallback = Callable[[RouteEntry], None]
ChangeCallback = Callable[[tuple[RouteEntry, ...]], None]


def _resolve_route(route: Route | str) -> Route:
    try:
        return Route(route)
    except ValueError:
        raise NavigationError(f"Unknown route: {route!r}") from None


def _check_params(route: Route, params: Mapping[str, str] | None) -> dict[str, str]:
    given = dict(params or {})
    expected = ROUTE_PARAMS[route]

    missing = expected - given.keys()
    if missing:
        raise NavigationError(f"Route {route.value} requires parameter(s): {', '.join(sorted(missing))}")

    extra = given.keys() - expected
    if extra:
        raise NavigationError(f"Route {route.value} does not take parameter(s): {', '.join(sorted(extra))}")

    for name, value in given.items():
        if not isinstance(value, str) or not value:
            raise NavigationError(f"Route {route.value} parameter {name!r} must be a non-empty string")
    return given


class Navigator:
    def __init__(self, initial_route: Route | str = INITIAL_ROUTE) -> None:
        route = _resolve_route(initial_route)
        self._keys = itertools.count(1)
        self._stack: list[RouteEntry] = [self._make_entry(route, _check_params(route, None))]
        self._focus_listeners: dict[Route, list[FocusCallback]] = {r: [] for r in Route}
        self._change_listeners: list[ChangeCallback] = []

    def _make_entry(self, route: Route, params: dict[str, str]) -> RouteEntry:
        return RouteEntry(key=next(self._keys), route=route, params=MappingProxyType(params))

    # ---- queries ----

    @property
    def current(self) -> RouteEntry:
        return self._stack[-1]

    @property
    def stack(self) -> tuple[RouteEntry, ...]:
        return tuple(self._stack)

    def can_go_back(self) -> bool:
        return len(self._stack) > 1

    # ---- subscriptions ----

    def subscribe_focus(self, route: Route | str, callback: FocusCallback) -> Callable[[], None]:
        r = _resolve_route(route)
        listeners = self._focus_listeners[r]
        listeners.append(callback)

        if self.current.route == r:
            callback(self.current)

        def _unsubscribe() -> None:
            if callback in listeners:
                listeners.remove(callback)

        return _unsubscribe

    def subscribe_change(self, callback: ChangeCallback) -> Callable[[], None]:
        self._change_listeners.append(callback)

        def _unsubscribe() -> None:
            if callback in self._change_listeners:
                self._change_listeners.remove(callback)

        return _unsubscribe

    # ---- transitions ----

    def navigate(self, route: Route | str, params: Mapping[str, str] | None = None) -> RouteEntry:
        """
        Go to route with params.

        An identical entry already on the stack is returned to (entries above
        it are popped); otherwise a new entry is pushed.
        """
        r = _resolve_route(route)
        checked = _check_params(r, params)

        for idx in range(len(self._stack) - 1, -1, -1):
            entry = self._stack[idx]
            if entry.route == r and dict(entry.params) == checked:
                if idx == len(self._stack) - 1:
                    return entry
                del self._stack[idx + 1 :]
                logger.debug("navigate: back to %s", r.value)
                self._emit()
                return entry

        entry = self._make_entry(r, checked)
        self._stack.append(entry)
        logger.debug("navigate: push %s params=%s", r.value, checked)
        self._emit()
        return entry

    def go_back(self) -> bool:
        """Pop the top entry. The initial entry is never popped."""
        if not self.can_go_back():
            return False
        popped = self._stack.pop()
        logger.debug("navigate: pop %s", popped.route.value)
        self._emit()
        return True

    def _emit(self) -> None:
        snapshot = self.stack
        # Hosts mount/unmount screens first, then the focused route is notified.
        for cb in list(self._change_listeners):
            cb(snapshot)
        top = snapshot[-1]
        for cb in list(self._focus_listeners[top.route]):
            cb(top)
