"""Use cases composing the interception pipeline."""

from __future__ import annotations

from .configure import ConfigurationGate, check_filter_level, check_output_directory
from .format_record import FormattedRecord, MessageFormatter
from .intercept import InterceptHook, ReentrancyGuard
from .write_record import RecordWriter

__all__ = [
    "ConfigurationGate",
    "FormattedRecord",
    "InterceptHook",
    "MessageFormatter",
    "RecordWriter",
    "ReentrancyGuard",
    "check_filter_level",
    "check_output_directory",
]
