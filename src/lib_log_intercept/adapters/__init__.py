"""Adapters implementing the application ports."""

from __future__ import annotations

from .console.rich_console import RichConsoleSink
from .file_sink import SeverityFileSink
from .host import LogHost
from .system import OsProcessIdentity, SystemClock

__all__ = [
    "LogHost",
    "OsProcessIdentity",
    "RichConsoleSink",
    "SeverityFileSink",
    "SystemClock",
]
