"""Ports for wall-clock time and process identity."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Provide the current timezone-aware timestamp."""

    def now(self) -> datetime: ...


@runtime_checkable
class ProcessIdentityPort(Protocol):
    """Return the process identifier printed in every record prefix."""

    def __call__(self) -> int: ...


__all__ = ["ClockPort", "ProcessIdentityPort"]
