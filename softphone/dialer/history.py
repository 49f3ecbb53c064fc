"""
Recent-call records shown next to the dial pad.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional

from softphone.utils.formatting import format_history_duration


class CallType(str, Enum):
    """Direction or outcome of a recent call."""
    INCOMING = "incoming"
    OUTGOING = "outgoing"
    MISSED = "missed"


@dataclass(frozen=True)
class CallRecord:
    """One entry in the recent-calls list."""
    id: str
    name: str
    number: str
    call_type: CallType
    timestamp: str
    avatar: str = ""
    duration_seconds: Optional[int] = None

    @property
    def duration_label(self) -> str:
        """Display duration; missed calls have none."""
        if self.call_type == CallType.MISSED:
            return ""
        return format_history_duration(self.duration_seconds)


class CallHistory:
    """In-memory list of recent calls, newest first."""

    def __init__(self, records: Optional[Iterable[CallRecord]] = None):
        self._records: List[CallRecord] = list(records or [])

    def add(self, record: CallRecord):
        self._records.insert(0, record)

    def recent(self, limit: Optional[int] = None) -> List[CallRecord]:
        if limit is None:
            return list(self._records)
        return self._records[:limit]

    def find_by_number(self, number: str) -> Optional[CallRecord]:
        for record in self._records:
            if record.number == number:
                return record
        return None

    def __iter__(self) -> Iterator[CallRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)


def sample_call_history() -> CallHistory:
    """Demo records for the dialer screen."""
    return CallHistory([
        CallRecord(
            id="1",
            name="Sarah Wilson",
            number="+1 (555) 123-4567",
            avatar="https://images.unsplash.com/photo-1494790108755-2616b612b77c?w=40&h=40&fit=crop&crop=face",
            call_type=CallType.INCOMING,
            duration_seconds=323,
            timestamp="Today, 2:30 PM",
        ),
        CallRecord(
            id="2",
            name="Mike Johnson",
            number="+1 (555) 987-6543",
            avatar="https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=40&h=40&fit=crop&crop=face",
            call_type=CallType.OUTGOING,
            duration_seconds=765,
            timestamp="Today, 11:15 AM",
        ),
        CallRecord(
            id="3",
            name="Unknown",
            number="+1 (555) 456-7890",
            call_type=CallType.MISSED,
            timestamp="Yesterday, 4:20 PM",
        ),
    ])
