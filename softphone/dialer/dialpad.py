"""
Dial pad for entering a number before a call is placed.
"""

from typing import Optional

from softphone.call.controller import CallSessionController
from softphone.call.keyboard import DTMF_SYMBOLS, KeyEvent
from softphone.dialer.history import CallHistory, CallRecord
from softphone.utils.logging import LoggerMixin


class DialPad(LoggerMixin):
    """
    Number entry and call placement while no call is active.

    Once a call starts the in-call shortcuts own the keyboard, so the pad
    ignores key presses until the call ends.
    """

    def __init__(self, controller: CallSessionController, history: Optional[CallHistory] = None):
        self.controller = controller
        self.history = history if history is not None else CallHistory()
        self.number = ""

    def press(self, symbol: str):
        """
        Append a dial pad symbol.

        Raises:
            ValueError: If the symbol is not on the dial pad
        """
        if len(symbol) != 1 or symbol not in DTMF_SYMBOLS:
            raise ValueError(f"Not a dial pad symbol: {symbol!r}")
        self.number += symbol

    def backspace(self):
        self.number = self.number[:-1]

    def clear(self):
        self.number = ""

    def call(self) -> bool:
        """
        Place a call to the entered number.

        Caller details come from a matching recent-call record when there is
        one.

        Returns:
            True if a call was started
        """
        if not self.number or self.controller.is_active:
            return False

        record = self.history.find_by_number(self.number)
        if record is not None:
            self.controller.initiate_call(self.number, record.name, record.avatar)
        else:
            self.controller.initiate_call(self.number)

        self.clear()
        return True

    def call_record(self, record: CallRecord) -> bool:
        """Call back a recent-call entry."""
        if self.controller.is_active:
            return False
        self.controller.initiate_call(record.number, record.name, record.avatar)
        return True

    def handle_key(self, event: KeyEvent) -> Optional[str]:
        """Keyboard entry for the pad; only active while idle."""
        if self.controller.is_active or event.in_text_field:
            return None

        if event.is_dtmf:
            self.press(event.key)
            return "dial_digit"
        if event.key == "Backspace":
            self.backspace()
            return "backspace"
        if event.key == "Enter" and self.number:
            self.call()
            return "place_call"
        return None
