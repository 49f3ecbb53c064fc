"""
Structured logging configuration for the softphone client.
Provides JSON-formatted logs with contextual information.
"""

import logging
import sys
import time
from contextvars import ContextVar
from typing import Optional

import structlog
from structlog.stdlib import LoggerFactory
from pythonjsonlogger.json import JsonFormatter

from softphone.config import settings

# Context variables for call tracking
call_id_var: ContextVar[Optional[str]] = ContextVar("call_id", default=None)
section_var: ContextVar[Optional[str]] = ContextVar("section", default=None)

# Keys that identify the remote party or what was dialed
SENSITIVE_KEYS = ("dialed_number", "number", "caller_name", "name", "digit")


def add_context_processor(logger, method_name, event_dict):
    """Add context variables to log entries."""
    call_id = call_id_var.get()
    section = section_var.get()

    if call_id:
        event_dict["call_id"] = call_id
    if section:
        event_dict["section"] = section

    event_dict["environment"] = settings.environment.value
    return event_dict


def add_timestamp(logger, method_name, event_dict):
    """Add timestamp to log entries."""
    event_dict["timestamp"] = time.time()
    return event_dict


def censor_sensitive_data(logger, method_name, event_dict):
    """Mask phone numbers, caller names and DTMF digits."""
    if settings.log_call_identifiers:
        return event_dict

    for key in SENSITIVE_KEYS:
        if key in event_dict and event_dict[key]:
            event_dict[key] = "[REDACTED]"

    return event_dict


def setup_logging():
    """Configure structured logging for the application."""
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    if settings.debug:
        log_level = logging.DEBUG

    json_formatter = JsonFormatter(
        fmt="%(timestamp)s %(level)s %(name)s %(message)s",
        rename_fields={"levelname": "level", "name": "logger"}
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(json_formatter)
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_timestamp,
            add_context_processor,
            censor_sensitive_data,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


class LoggerMixin:
    """Mixin class to add logging capabilities to any class."""

    @property
    def logger(self) -> structlog.BoundLogger:
        """Get a logger instance for this class."""
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger

    def log_error(self, operation: str, error: Exception, **kwargs):
        """Log an error with context."""
        self.logger.error(
            f"{operation}_failed",
            error_type=type(error).__name__,
            error_message=str(error),
            **kwargs
        )


# Initialize logging when module is imported
setup_logging()
