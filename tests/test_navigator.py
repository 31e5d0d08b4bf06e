# tests/test_navigator.py

from __future__ import annotations

import pytest

from tasktrack.navigation.navigator import NavigationError, Navigator, Route


def test_starts_on_list_route() -> None:
    nav = Navigator()
    assert nav.current.route == Route.LIST
    assert dict(nav.current.params) == {}
    assert not nav.can_go_back()


def test_detail_requires_exactly_an_id() -> None:
    nav = Navigator()
    with pytest.raises(NavigationError):
        nav.navigate(Route.DETAIL)
    with pytest.raises(NavigationError):
        nav.navigate(Route.DETAIL, {"id": ""})
    with pytest.raises(NavigationError):
        nav.navigate(Route.DETAIL, {"id": "1", "extra": "2"})
    with pytest.raises(NavigationError):
        nav.navigate(Route.ADD, {"id": "1"})

    entry = nav.navigate(Route.DETAIL, {"id": "42"})
    assert entry.route == Route.DETAIL
    assert dict(entry.params) == {"id": "42"}


def test_unknown_route_is_rejected() -> None:
    nav = Navigator()
    with pytest.raises(NavigationError):
        nav.navigate("settings")
    with pytest.raises(NavigationError):
        Navigator("nowhere")


def test_routes_accept_their_string_names() -> None:
    nav = Navigator()
    nav.navigate("add_task")
    assert nav.current.route == Route.ADD


def test_back_returns_to_list_and_never_pops_it() -> None:
    nav = Navigator()
    nav.navigate(Route.ADD)
    assert nav.go_back() is True
    assert nav.current.route == Route.LIST
    assert nav.go_back() is False
    assert len(nav.stack) == 1


def test_navigate_to_list_pops_back_to_existing_entry() -> None:
    nav = Navigator()
    first = nav.current
    nav.navigate(Route.DETAIL, {"id": "1"})
    nav.navigate(Route.ADD)
    assert nav.navigate(Route.LIST) is first
    assert nav.stack == (first,)


def test_focus_is_level_triggered_and_unsubscribable() -> None:
    nav = Navigator()
    seen: list[str] = []

    unsubscribe = nav.subscribe_focus(Route.LIST, lambda e: seen.append(e.route.value))
    assert seen == ["list_tasks"]  # already focused on subscribe

    nav.navigate(Route.DETAIL, {"id": "1"})
    assert seen == ["list_tasks"]
    nav.go_back()
    assert seen == ["list_tasks", "list_tasks"]

    # Re-navigating to the route that is already on top is not a focus event.
    nav.navigate(Route.LIST)
    assert len(seen) == 2

    unsubscribe()
    nav.navigate(Route.ADD)
    nav.go_back()
    assert len(seen) == 2


def test_change_listeners_run_before_focus_listeners() -> None:
    nav = Navigator()
    order: list[str] = []
    nav.subscribe_change(lambda stack: order.append(f"change:{len(stack)}"))
    nav.navigate(Route.ADD)
    nav.subscribe_focus(Route.LIST, lambda e: order.append("focus"))
    nav.go_back()
    assert order == ["change:2", "change:1", "focus"]
