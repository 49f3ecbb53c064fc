"""
Dial pad and recent calls.
"""

from .history import CallHistory, CallRecord, CallType, sample_call_history
from .dialpad import DialPad

__all__ = ["CallHistory", "CallRecord", "CallType", "sample_call_history", "DialPad"]
