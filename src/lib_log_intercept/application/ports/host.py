"""Ports describing the host process the hook is installed into.

Purpose
-------
Keep the application layer independent of any concrete host: it only needs a
hook slot to chain into, the live emission threshold, and the statement that
is currently executing.

Contents
--------
* :data:`EventHandler` – signature of an emission hook.
* :class:`HookSlot` – the host's single-callback extension point.
* :class:`ThresholdSource` – live minimum severity the host emits.
* :class:`StatementSource` – statement text in flight, if any.
* :class:`InterceptHost` – all three host roles combined.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, runtime_checkable

from lib_log_intercept.domain.events import LogEvent
from lib_log_intercept.domain.levels import Severity

EventHandler = Callable[[LogEvent], None]
"""Callable invoked by the host for every log event it emits."""


@runtime_checkable
class HookSlot(Protocol):
    """Host extension point holding at most one emission hook."""

    emit_log_hook: Optional[EventHandler]


@runtime_checkable
class ThresholdSource(Protocol):
    """Report the host's live minimum emission severity."""

    def current_threshold(self) -> Severity: ...


@runtime_checkable
class StatementSource(Protocol):
    """Report the statement text currently being executed."""

    def current_statement(self) -> str | None: ...


@runtime_checkable
class InterceptHost(HookSlot, ThresholdSource, StatementSource, Protocol):
    """Everything the runtime needs from a host in one object."""


__all__ = ["EventHandler", "HookSlot", "InterceptHost", "StatementSource", "ThresholdSource"]
