"""
Call session components for the softphone client.
"""

from .session import CallSession
from .controller import CallSessionController
from .keyboard import KeyboardHub, KeyEvent
from .timer import DurationTimer

__all__ = ["CallSession", "CallSessionController", "KeyboardHub", "KeyEvent", "DurationTimer"]
