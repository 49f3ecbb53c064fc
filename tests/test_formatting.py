"""
Tests for duration formatting.
"""

import pytest

from softphone.utils.formatting import format_duration, format_history_duration


@pytest.mark.parametrize("seconds,expected", [
    (0, "0:00"),
    (45, "0:45"),
    (125, "2:05"),
    (3599, "59:59"),
    (3600, "01:00:00"),
    (3661, "01:01:01"),
    (36000, "10:00:00"),
])
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_format_duration_rejects_negative():
    with pytest.raises(ValueError):
        format_duration(-1)


@pytest.mark.parametrize("seconds,expected", [
    (None, "0:00"),
    (-5, "0:00"),
    (323, "5:23"),
    (3661, "61:01"),
])
def test_format_history_duration(seconds, expected):
    assert format_history_duration(seconds) == expected
