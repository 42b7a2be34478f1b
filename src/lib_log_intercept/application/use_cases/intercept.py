"""Emission hook that filters, formats, and writes intercepted events.

Purpose
-------
Sit in the host's single emission-hook slot without taking it away from
anyone: the previously installed hook is always called first, then events
matching the configured level are rendered and written.

Contents
--------
* :class:`ReentrancyGuard` – per-thread/per-task "already inside" flag.
* :class:`InterceptHook` – the :data:`EventHandler` installed into the host.

System Role
-----------
Application-layer orchestrator wired by :mod:`lib_log_intercept.runtime`.
Writing a file record can itself make the host report an error, which calls
the hook again; the guard drops that nested event for this hook while the
chained hook still sees it.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from lib_log_intercept.application.ports import EventHandler, HookSlot
from lib_log_intercept.domain import FilterConfig, LogEvent

from .format_record import MessageFormatter
from .write_record import RecordWriter

logger = logging.getLogger(__name__)


class ReentrancyGuard:
    """Track whether the current call stack is already inside the hook.

    Backed by a :class:`contextvars.ContextVar`, so each thread (and each
    asyncio task) has its own flag.
    """

    def __init__(self, name: str = "lib_log_intercept_in_hook") -> None:
        self._active: contextvars.ContextVar[bool] = contextvars.ContextVar(name, default=False)

    @property
    def active(self) -> bool:
        return self._active.get()

    @contextmanager
    def hold(self) -> Iterator[None]:
        """Mark the current context as inside the hook until the block exits."""

        token = self._active.set(True)
        try:
            yield
        finally:
            self._active.reset(token)


class InterceptHook:
    """Emission hook chaining to its predecessor and re-emitting one level."""

    def __init__(
        self,
        *,
        config: FilterConfig,
        formatter: MessageFormatter,
        writer: RecordWriter,
        guard: ReentrancyGuard | None = None,
    ) -> None:
        self._config = config
        self._formatter = formatter
        self._writer = writer
        self._guard = guard if guard is not None else ReentrancyGuard()
        self._previous: Optional[EventHandler] = None
        self._slot: HookSlot | None = None

    @property
    def previous(self) -> Optional[EventHandler]:
        """Hook that was active before :meth:`install`, if any."""

        return self._previous

    @property
    def installed(self) -> bool:
        return self._slot is not None and self._slot.emit_log_hook is self

    def __call__(self, event: LogEvent) -> None:
        if self._previous is not None:
            self._previous(event)

        if self._guard.active:
            return

        snapshot = self._config.snapshot()
        if snapshot.filter_level is None or event.level != snapshot.filter_level:
            return

        with self._guard.hold():
            record = self._formatter.format(event)
            self._writer.write(record.render(), event.level, snapshot.output_directory)

    def install(self, slot: HookSlot) -> None:
        """Save the slot's current hook and install this one in its place."""

        self._previous = slot.emit_log_hook
        self._slot = slot
        slot.emit_log_hook = self
        logger.debug("intercept hook installed (chained=%s)", self._previous is not None)

    def uninstall(self) -> None:
        """Put the hook saved by :meth:`install` back into the slot.

        Hooks sharing a slot must be uninstalled in reverse installation
        order. Calling this again restores the same saved hook again.
        """

        if self._slot is None:
            return
        self._slot.emit_log_hook = self._previous
        logger.debug("intercept hook uninstalled")


__all__ = ["InterceptHook", "ReentrancyGuard"]
