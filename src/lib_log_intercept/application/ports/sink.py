"""Port for destinations that receive finished intercept records."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_intercept.domain.levels import Severity


@runtime_checkable
class SinkPort(Protocol):
    """Write one formatted record for an event of ``level``."""

    def write(self, record: str, level: Severity) -> None:
        """Persist ``record``; raise only when the sink must be noticed."""


__all__ = ["SinkPort"]
