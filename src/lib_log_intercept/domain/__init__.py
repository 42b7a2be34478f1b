"""Domain entities and value objects used by the interception pipeline."""

from __future__ import annotations

from .config import FilterConfig, FilterSnapshot
from .errors import ConfigError, ConfigErrorKind, InterceptIOError, IOErrorKind
from .events import LogEvent
from .levels import Severity, is_log_level_output, parse_filter_level, severity_label
from .sqlstate import make_sqlstate, unpack_sqlstate

__all__ = [
    "ConfigError",
    "ConfigErrorKind",
    "FilterConfig",
    "FilterSnapshot",
    "IOErrorKind",
    "InterceptIOError",
    "LogEvent",
    "Severity",
    "is_log_level_output",
    "make_sqlstate",
    "parse_filter_level",
    "severity_label",
    "unpack_sqlstate",
]
