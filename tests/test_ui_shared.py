from __future__ import annotations

from pim_admin_app.app.navigation import SCREEN_SPECS
from pim_admin_app.ui.shared.notification_center import NotificationCenter
from pim_admin_app.ui.shared.view_state import ViewStateStatus, resolve_state


def test_resolve_state() -> None:
    assert resolve_state(is_loading=True, error=None, has_data=False).status is ViewStateStatus.LOADING
    assert resolve_state(is_loading=False, error="x", has_data=True).status is ViewStateStatus.PARTIAL_ERROR
    assert resolve_state(is_loading=False, error="x", has_data=False).status is ViewStateStatus.FATAL_ERROR
    assert resolve_state(is_loading=False, error=None, has_data=False).status is ViewStateStatus.EMPTY
    assert resolve_state(is_loading=False, error=None, has_data=True).render() == {
        "status": "success",
        "message": "Ready",
        "data_available": True,
    }


def test_notification_center_queue() -> None:
    center = NotificationCenter()
    assert center.latest() is None
    center.push(level="error", title="Error", message="first")
    center.push(level="info", title="About", header="PIM Admin Desktop", message="second")
    assert center.latest()["message"] == "second"
    assert center.render()["count"] == 2
    center.clear()
    assert center.render() == {"count": 0, "messages": []}


def test_screen_specs() -> None:
    assert (SCREEN_SPECS["login"].width, SCREEN_SPECS["login"].height) == (400, 300)
    assert (SCREEN_SPECS["dashboard"].width, SCREEN_SPECS["dashboard"].height) == (1200, 800)
