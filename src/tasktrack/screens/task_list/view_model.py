# src/tasktrack/screens/task_list/view_model.py

"""
Task list view-model.

Owns (tasks, is_loading) for one mounted list screen and the refresh protocol.

Key invariants:
- is_loading is True only while a list_tasks() call is in flight; it is cleared
  in a finally block, so a crashed or cancelled request never leaves it raised.
- a failed fetch leaves tasks untouched; a successful one replaces them wholesale.
- listeners hear one change when loading starts and one when it settles.
- one refresh per focus event. Overlapping refreshes are not de-duplicated:
  the last to settle wins.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from ...core.models import FailureKind, FetchFailed, FetchOk, FetchResult, Task
from ...core.ports import FocusEvents, TaskSource
from ...navigation.navigator import Route, RouteEntry
from ...remote.client import friendly_fetch_error_message

logger = logging.getLogger(__name__)

ChangeListener = Callable[["TaskListViewModel"], None]


class TaskListViewModel:
    def __init__(self, source: TaskSource) -> None:
        self._source = source
        self._tasks: tuple[Task, ...] = ()
        self._is_loading = False
        self._mounted = True
        self._listeners: list[ChangeListener] = []
        self._unsubscribe_focus: Callable[[], None] | None = None
        self._pending: set[asyncio.Task[FetchResult]] = set()

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._tasks

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def pending(self) -> frozenset[asyncio.Task[FetchResult]]:
        return frozenset(self._pending)

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Task list listener failed.")

    # ---- lifecycle ----

    def attach(self, focus_events: FocusEvents, route: Route = Route.LIST) -> None:
        """Refresh every time `route` becomes focused, until detach()."""
        if self._unsubscribe_focus is not None:
            raise RuntimeError("TaskListViewModel is already attached")
        self._unsubscribe_focus = focus_events.subscribe_focus(route, self._on_focus)

    def detach(self) -> None:
        """Screen unmounted: stop listening, and never apply a late response."""
        if self._unsubscribe_focus is not None:
            self._unsubscribe_focus()
            self._unsubscribe_focus = None
        self._mounted = False
        self._listeners.clear()

    def _on_focus(self, entry: RouteEntry) -> None:
        logger.debug("Focus on %s (key=%s) -> refresh", entry.route.value, entry.key)
        task = asyncio.get_running_loop().create_task(self.refresh())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    # ---- refresh ----

    async def refresh(self) -> FetchResult:
        self._is_loading = True
        self._notify()

        result: FetchResult
        try:
            try:
                result = await self._source.list_tasks()
            except Exception as e:
                logger.exception("Task source raised instead of returning a result.")
                result = FetchFailed(FailureKind.NETWORK, e.__class__.__name__)

            if isinstance(result, FetchOk):
                if self._mounted:
                    self._tasks = result.tasks
                    logger.info("Task list refreshed: %d tasks", len(result.tasks))
                else:
                    logger.debug("Dropping task list response for an unmounted screen.")
            else:
                logger.warning("Task list refresh failed: %s", friendly_fetch_error_message(result))
        finally:
            self._is_loading = False
            if self._mounted:
                self._notify()

        return result
