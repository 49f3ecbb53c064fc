"""
Call session state for the single active call.
"""

from dataclasses import dataclass, asdict, replace
from typing import Any, Dict


@dataclass
class CallSession:
    """
    State of the one call the client can hold at a time.

    A freshly constructed instance is the idle baseline. Every flag is
    independent of the others; ``minimized`` is only meaningful while
    ``active`` is True.
    """
    active: bool = False
    dialed_number: str = ""
    caller_name: str = ""
    caller_avatar: str = ""

    # Call controls
    muted: bool = False
    on_hold: bool = False
    speaker_on: bool = False
    recording: bool = False
    in_call_dialer_open: bool = False
    minimized: bool = False

    # Elapsed connected time
    duration_seconds: int = 0

    @property
    def should_tick(self) -> bool:
        """Whether the duration timer should be running."""
        return self.active and not self.on_hold

    def is_idle_baseline(self) -> bool:
        """Check that every field holds its default value."""
        return self == CallSession()

    def snapshot(self) -> "CallSession":
        """Return an independent copy for readers."""
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

