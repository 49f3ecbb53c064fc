"""
Tests for the structured logging setup and redaction of call identifiers.
"""

import logging

import pytest

from softphone.config import settings
from softphone.utils.logging import censor_sensitive_data, setup_logging


def make_event():
    return {
        "event": "call_initiated",
        "number": "555-1234",
        "caller_name": "Sarah Wilson",
        "digit": "7",
        "duration_seconds": 42,
    }


def test_identifiers_redacted_by_default(monkeypatch):
    monkeypatch.setattr(settings, "log_call_identifiers", False)

    event = censor_sensitive_data(None, "info", make_event())

    assert event["number"] == "[REDACTED]"
    assert event["caller_name"] == "[REDACTED]"
    assert event["digit"] == "[REDACTED]"
    assert event["event"] == "call_initiated"
    assert event["duration_seconds"] == 42


def test_identifiers_kept_when_enabled(monkeypatch):
    monkeypatch.setattr(settings, "log_call_identifiers", True)

    event = censor_sensitive_data(None, "info", make_event())

    assert event == make_event()


def test_empty_identifiers_left_alone(monkeypatch):
    monkeypatch.setattr(settings, "log_call_identifiers", False)

    event = censor_sensitive_data(None, "info", {"event": "call_initiated", "number": ""})

    assert event["number"] == ""


def test_debug_forces_debug_level(monkeypatch):
    monkeypatch.setattr(settings, "debug", True)
    monkeypatch.setattr(settings, "log_level", "WARNING")
    setup_logging()
    assert logging.getLogger().level == logging.DEBUG

    monkeypatch.setattr(settings, "debug", False)
    setup_logging()
    assert logging.getLogger().level == logging.WARNING

    monkeypatch.setattr(settings, "log_level", "INFO")
    setup_logging()
