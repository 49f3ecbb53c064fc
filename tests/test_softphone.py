"""
End-to-end flow through the wired softphone.
"""

import asyncio

import pytest

from softphone.config import Settings
from softphone.main import build_softphone, render, run_demo
from softphone.navigation import Section


@pytest.mark.asyncio
async def test_end_to_end_flow():
    """Dial, talk, wander off, come back and hang up."""
    phone = build_softphone(tick_interval=0.02)
    phone.router.navigate("dialer")

    for key in "5551234":
        phone.keyboard.press(key)
    phone.keyboard.press("Enter")
    assert phone.controller.is_active

    await asyncio.sleep(0.07)
    assert phone.controller.session.duration_seconds >= 1

    phone.router.navigate("chats")
    assert phone.controller.session.minimized

    phone.controller.maximize_call()
    assert phone.router.active_section == Section.DIALER
    assert not phone.controller.session.minimized

    phone.keyboard.press("Escape")
    assert phone.controller.session.is_idle_baseline()
    assert not phone.controller.timer_running

    await phone.shutdown()


@pytest.mark.asyncio
async def test_run_demo(capsys):
    await run_demo(tick_interval=0.01)
    out = capsys.readouterr().out
    assert "5551234" in out
    assert "[idle]" in out


def test_render():
    phone = build_softphone()
    assert render(phone.controller.session, "0:00") == "[idle]"

    phone.controller.initiate_call("555", "Sarah")
    phone.controller.toggle_mute()
    assert render(phone.controller.session, "0:00") == "[Sarah 555 0:00] muted"


def test_settings_validation():
    with pytest.raises(ValueError):
        Settings(call_tick_interval_seconds=0)
    with pytest.raises(ValueError):
        Settings(default_section="calendar")
    assert Settings(default_section="contacts").default_section is Section.CONTACTS
    assert Settings().call_tick_interval_seconds == 1.0
