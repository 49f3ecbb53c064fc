"""
Application wiring for the softphone client and a scripted console demo.
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

from softphone.call import CallSession, CallSessionController, KeyboardHub
from softphone.dialer import CallHistory, DialPad, sample_call_history
from softphone.navigation import ViewRouter
from softphone.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class Softphone:
    """The wired-up client: one controller shared by every view."""
    controller: CallSessionController
    router: ViewRouter
    keyboard: KeyboardHub
    dialpad: DialPad
    history: CallHistory

    async def shutdown(self):
        self.router.detach()
        await self.controller.aclose()


def build_softphone(
    tick_interval: Optional[float] = None,
    history: Optional[CallHistory] = None,
    default_section: Optional[str] = None,
) -> Softphone:
    """
    Create the controller and its collaborators and connect them.

    Args:
        tick_interval: Seconds between call duration ticks
        history: Recent calls for the dial pad (demo records by default)
        default_section: Section shown at start-up
    """
    keyboard = KeyboardHub()
    controller = CallSessionController(keyboard=keyboard, tick_interval=tick_interval)
    router = ViewRouter(default_section=default_section)
    router.attach(controller)

    history = history if history is not None else sample_call_history()
    dialpad = DialPad(controller, history=history)
    keyboard.add_listener(dialpad.handle_key)

    return Softphone(
        controller=controller,
        router=router,
        keyboard=keyboard,
        dialpad=dialpad,
        history=history,
    )


def render(session: CallSession, duration: str) -> str:
    """One-line text rendering of the call screen."""
    if not session.active:
        return "[idle]"
    flags = [
        name for name, on in (
            ("muted", session.muted),
            ("hold", session.on_hold),
            ("speaker", session.speaker_on),
            ("rec", session.recording),
            ("keypad", session.in_call_dialer_open),
            ("minimized", session.minimized),
        ) if on
    ]
    return f"[{session.caller_name} {session.dialed_number} {duration}] {' '.join(flags)}".rstrip()


async def run_demo(tick_interval: float = 0.2):
    """Walk through a short call using key presses and navigation."""
    phone = build_softphone(tick_interval=tick_interval)
    phone.controller.subscribe(
        lambda session: print(render(session, phone.controller.format_duration()))
    )

    logger.info("Starting softphone demo...")
    phone.router.navigate("dialer")

    for key in "5551234":
        phone.keyboard.press(key)
    phone.keyboard.press("Enter")
    await asyncio.sleep(tick_interval * 3.5)

    phone.keyboard.press("m")
    phone.keyboard.press("h")
    await asyncio.sleep(tick_interval * 2)
    phone.keyboard.press("h")

    phone.router.navigate("contacts")
    await asyncio.sleep(tick_interval * 2)
    phone.controller.maximize_call()

    phone.keyboard.press("d")
    for key in "42#":
        phone.keyboard.press(key)
    phone.keyboard.press("Escape")
    phone.keyboard.press("Escape")

    await phone.shutdown()
    logger.info("Softphone demo finished")


def cli():
    asyncio.run(run_demo())


if __name__ == "__main__":
    cli()
