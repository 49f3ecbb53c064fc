"""
Duration formatting helpers for the call screen and the recent-calls list.
"""

from typing import Optional


def format_duration(seconds: int) -> str:
    """
    Format an elapsed call duration for the call screen.

    Calls of an hour or longer render as ``HH:MM:SS``; shorter calls render as
    ``M:SS``.

    Args:
        seconds: Elapsed connected time in whole seconds

    Returns:
        Formatted duration string

    Raises:
        ValueError: If seconds is negative
    """
    if seconds < 0:
        raise ValueError(f"Duration cannot be negative: {seconds}")

    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60

    if seconds >= 3600:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_history_duration(seconds: Optional[int]) -> str:
    """Format a recent-call duration as M:SS; missing or negative values render as 0:00."""
    if seconds is None or seconds < 0:
        return "0:00"
    minutes = seconds // 60
    return f"{minutes}:{seconds % 60:02d}"
