"""
Keyboard event routing and the in-call shortcut table.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from softphone.utils.logging import LoggerMixin


# Single-key shortcuts available while a call is active
CALL_SHORTCUTS = {
    "m": "toggle_mute",
    "h": "toggle_hold",
    "s": "toggle_speaker",
    "d": "toggle_in_call_dialer",
    "r": "toggle_recording",
    "q": "toggle_call_minimized",
}

ESCAPE = "escape"
DTMF_SYMBOLS = frozenset("0123456789*#")


@dataclass(frozen=True)
class KeyEvent:
    """A single key press."""
    key: str
    in_text_field: bool = False

    @property
    def normalized(self) -> str:
        return self.key.lower()

    @property
    def is_dtmf(self) -> bool:
        return len(self.key) == 1 and self.key in DTMF_SYMBOLS


KeyListener = Callable[[KeyEvent], Optional[str]]


class KeyboardHub(LoggerMixin):
    """
    Routes key presses to registered listeners.

    Listeners are offered the event in registration order; the first one
    that returns an action name consumes it.
    """

    def __init__(self):
        self._listeners: List[KeyListener] = []

    def add_listener(self, listener: KeyListener):
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: KeyListener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def has_listener(self, listener: KeyListener) -> bool:
        return listener in self._listeners

    def press(self, key: str, in_text_field: bool = False) -> Optional[str]:
        """
        Deliver a key press.

        Args:
            key: Key name as reported by the input layer (e.g. "m", "Escape", "5")
            in_text_field: True when focus is inside a text-entry field

        Returns:
            Name of the action that handled the key, or None
        """
        event = KeyEvent(key=key, in_text_field=in_text_field)
        for listener in list(self._listeners):
            action = listener(event)
            if action:
                self.logger.debug("key_handled", key=key, action=action)
                return action
        return None
