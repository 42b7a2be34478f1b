"""Protocols separating the application layer from hosts and sinks."""

from __future__ import annotations

from .host import EventHandler, HookSlot, InterceptHost, StatementSource, ThresholdSource
from .sink import SinkPort
from .time import ClockPort, ProcessIdentityPort

__all__ = [
    "ClockPort",
    "EventHandler",
    "HookSlot",
    "InterceptHost",
    "ProcessIdentityPort",
    "SinkPort",
    "StatementSource",
    "ThresholdSource",
]
