"""
Tests for the view router and its coupling with the call controller.
"""

import pytest

from softphone.call import CallSessionController
from softphone.navigation import CLOSE_GLOBAL_DIALER, Section, ViewRouter


@pytest.fixture
def controller():
    return CallSessionController()


@pytest.fixture
def router(controller):
    router = ViewRouter(default_section="chats")
    router.attach(controller)
    return router


def test_default_section():
    assert ViewRouter(default_section="settings").active_section == Section.SETTINGS
    assert ViewRouter().active_section == Section.CHATS


def test_navigate(router):
    assert router.navigate("contacts") == Section.CONTACTS
    assert router.active_section == Section.CONTACTS


def test_navigate_unknown_section(router):
    with pytest.raises(ValueError):
        router.navigate("calendar")
    assert router.active_section == Section.CHATS


def test_leaving_dialer_minimizes_call(router, controller):
    router.navigate("dialer")
    controller.initiate_call("555-1234")
    router.open_global_dialer()

    router.navigate("contacts")
    assert controller.session.minimized
    assert not router.global_dialer_open
    assert router.active_section == Section.CONTACTS

    router.navigate("dialer")
    assert not controller.session.minimized
    assert router.active_section == Section.DIALER


def test_maximize_navigates_without_oscillation(router, controller):
    controller.initiate_call("555-1234")
    router.navigate("settings")
    assert controller.session.minimized

    controller.maximize_call()
    assert router.active_section == Section.DIALER
    assert not controller.session.minimized


def test_minimize_closes_global_dialer(router, controller):
    router.navigate("dialer")
    controller.initiate_call("555-1234")
    router.open_global_dialer()

    controller.toggle_call_minimized()
    assert not router.global_dialer_open
    assert router.active_section == Section.DIALER


def test_close_signal_does_not_navigate(router):
    router.open_global_dialer()
    router.handle_call_signal(CLOSE_GLOBAL_DIALER)
    assert not router.global_dialer_open
    assert router.active_section == Section.CHATS


def test_navigation_while_idle_leaves_session_alone(router, controller):
    for section in ("dialer", "contacts", "settings", "chats"):
        router.navigate(section)
    assert controller.session.is_idle_baseline()


def test_detach(router, controller):
    router.detach()
    controller.initiate_call("555-1234")
    router.navigate("contacts")
    assert not controller.session.minimized


def test_router_uses_configured_section(monkeypatch):
    from softphone.config import settings

    monkeypatch.setattr(settings, "default_section", Section.CONTACTS)
    assert ViewRouter().active_section == Section.CONTACTS
