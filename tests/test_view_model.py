# tests/test_view_model.py

from __future__ import annotations

import asyncio
import logging

import pytest

from tasktrack.core.models import FailureKind, FetchFailed, FetchOk
from tasktrack.navigation.navigator import Navigator, Route
from tasktrack.screens.task_list.view_model import TaskListViewModel

from .fakes import FakeTaskSource, task


async def _drain(vm: TaskListViewModel) -> None:
    while vm.pending:
        await asyncio.gather(*vm.pending)


@pytest.mark.asyncio
async def test_loading_only_while_request_in_flight() -> None:
    source = FakeTaskSource(FetchOk((task("1"),)), gated=True)
    vm = TaskListViewModel(source)
    assert vm.is_loading is False

    running = asyncio.create_task(vm.refresh())
    await source.started.wait()
    assert vm.is_loading is True
    assert vm.tasks == ()

    source.release.set()
    await running
    assert vm.is_loading is False
    assert [t.id for t in vm.tasks] == ["1"]


@pytest.mark.asyncio
async def test_success_replaces_collection_wholesale() -> None:
    source = FakeTaskSource(
        FetchOk((task("1"), task("2"))),
        FetchOk((task("3"),)),
    )
    vm = TaskListViewModel(source)

    await vm.refresh()
    assert [t.id for t in vm.tasks] == ["1", "2"]

    await vm.refresh()
    assert [t.id for t in vm.tasks] == ["3"]


@pytest.mark.asyncio
async def test_failure_keeps_previous_tasks_and_logs(caplog) -> None:
    before = (task("1", "Buy milk"),)
    source = FakeTaskSource(
        FetchOk(before),
        FetchFailed(FailureKind.HTTP_STATUS, "Internal Server Error", status_code=500),
    )
    vm = TaskListViewModel(source)
    await vm.refresh()

    with caplog.at_level(logging.WARNING, logger="tasktrack"):
        result = await vm.refresh()

    assert isinstance(result, FetchFailed)
    assert vm.tasks == before
    assert vm.is_loading is False
    assert "HTTP 500" in caplog.text


@pytest.mark.asyncio
async def test_source_exception_is_soft_failed() -> None:
    source = FakeTaskSource(FetchOk((task("1"),)), RuntimeError("boom"))
    vm = TaskListViewModel(source)
    await vm.refresh()

    result = await vm.refresh()

    assert isinstance(result, FetchFailed)
    assert [t.id for t in vm.tasks] == ["1"]
    assert vm.is_loading is False


@pytest.mark.asyncio
async def test_cancelled_refresh_clears_loading() -> None:
    source = FakeTaskSource(gated=True)
    vm = TaskListViewModel(source)

    running = asyncio.create_task(vm.refresh())
    await source.started.wait()
    running.cancel()
    with pytest.raises(asyncio.CancelledError):
        await running

    assert vm.is_loading is False


@pytest.mark.asyncio
async def test_listeners_never_see_new_tasks_while_loading() -> None:
    source = FakeTaskSource(FetchOk((task("1"),)))
    vm = TaskListViewModel(source)
    seen: list[tuple[bool, int]] = []
    vm.subscribe(lambda m: seen.append((m.is_loading, len(m.tasks))))

    await vm.refresh()

    assert seen == [(True, 0), (False, 1)]


@pytest.mark.asyncio
async def test_late_response_is_not_applied_after_detach() -> None:
    source = FakeTaskSource(FetchOk((task("1"),)), gated=True)
    vm = TaskListViewModel(source)

    running = asyncio.create_task(vm.refresh())
    await source.started.wait()
    vm.detach()
    source.release.set()
    await running

    assert vm.tasks == ()
    assert vm.is_loading is False


@pytest.mark.asyncio
async def test_one_fetch_per_focus_event() -> None:
    nav = Navigator()
    source = FakeTaskSource(FetchOk((task("1"),)))
    vm = TaskListViewModel(source)

    vm.attach(nav)  # list already focused -> initial refresh
    await _drain(vm)
    assert source.calls == 1

    nav.navigate(Route.DETAIL, {"id": "1"})
    await _drain(vm)
    assert source.calls == 1

    nav.go_back()
    await _drain(vm)
    assert source.calls == 2

    # Listener notifications (redraws) do not trigger fetches.
    vm.subscribe(lambda _m: None)
    await vm.refresh()
    assert source.calls == 3

    vm.detach()
    nav.navigate(Route.ADD)
    nav.go_back()
    await _drain(vm)
    assert source.calls == 3


@pytest.mark.asyncio
async def test_attach_twice_is_an_error() -> None:
    nav = Navigator()
    vm = TaskListViewModel(FakeTaskSource())
    vm.attach(nav)
    with pytest.raises(RuntimeError):
        vm.attach(nav)
    await _drain(vm)


@pytest.mark.asyncio
async def test_overlapping_refreshes_last_to_settle_wins() -> None:
    class TwoPhaseSource:
        def __init__(self) -> None:
            self.gates = [asyncio.Event(), asyncio.Event()]
            self.results = [FetchOk((task("old"),)), FetchOk((task("new"),))]
            self.calls = 0

        async def list_tasks(self):
            i = self.calls
            self.calls += 1
            await self.gates[i].wait()
            return self.results[i]

    source = TwoPhaseSource()
    vm = TaskListViewModel(source)
    first = asyncio.create_task(vm.refresh())
    second = asyncio.create_task(vm.refresh())
    await asyncio.sleep(0)

    source.gates[1].set()
    await second
    source.gates[0].set()
    await first

    assert [t.id for t in vm.tasks] == ["old"]
