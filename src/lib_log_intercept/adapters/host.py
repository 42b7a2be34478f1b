"""In-process host exposing a single emission-hook slot.

Purpose
-------
Give Python applications the host side of the interception contract: a place
to install emission hooks, a live minimum severity, the statement currently
being executed, and a primary log emission that hooks never affect.

Contents
--------
* :class:`LogHost` – hook slot, threshold source, statement source and
  reporter in one object.

System Role
-----------
Outer adapter. The primary emission goes to a stdlib :mod:`logging` logger;
interception is layered on top through :attr:`LogHost.emit_log_hook`.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from lib_log_intercept.application.ports import EventHandler, HookSlot, StatementSource, ThresholdSource
from lib_log_intercept.domain import LogEvent, Severity, is_log_level_output


class LogHost(HookSlot, ThresholdSource, StatementSource):
    """Minimal host emitting :class:`LogEvent` objects.

    Parameters
    ----------
    name:
        Name of the stdlib logger used for the primary emission.
    log_min_messages:
        Live minimum severity sent to the server log. Events below it reach
        neither the hook nor the primary log.
    logger:
        Explicit logger overriding ``name``.

    Examples
    --------
    >>> seen = []
    >>> host = LogHost("doctest.host", log_min_messages=Severity.WARNING)
    >>> host.emit_log_hook = lambda event: seen.append(event.message)
    >>> host.report(Severity.ERROR, "boom")
    >>> host.report(Severity.INFO, "quiet")
    >>> seen
    ['boom']
    """

    def __init__(
        self,
        name: str = "lib_log_intercept.host",
        *,
        log_min_messages: Severity = Severity.WARNING,
        logger: logging.Logger | None = None,
    ) -> None:
        self.emit_log_hook: Optional[EventHandler] = None
        self.log_min_messages = log_min_messages
        self.debug_query_string: str | None = None
        self._logger = logger if logger is not None else logging.getLogger(name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def current_threshold(self) -> Severity:
        return self.log_min_messages

    def current_statement(self) -> str | None:
        return self.debug_query_string

    @contextmanager
    def statement(self, text: str) -> Iterator[str]:
        """Mark ``text`` as the statement in flight for the block."""

        previous = self.debug_query_string
        self.debug_query_string = text
        try:
            yield text
        finally:
            self.debug_query_string = previous

    def ereport(self, event: LogEvent) -> None:
        """Emit ``event``: run the hook, then the primary log emission.

        The primary emission happens even when the hook raises; the hook's
        exception then propagates to the caller.
        """

        if not is_log_level_output(event.level, self.log_min_messages):
            return
        hook = self.emit_log_hook
        try:
            if hook is not None:
                hook(event)
        finally:
            self._emit_primary(event)

    def report(self, level: Severity, message: str | None, **fields: Any) -> None:
        """Build a :class:`LogEvent` from keyword fields and emit it."""

        self.ereport(LogEvent(level=level, message=message, **fields))

    def _emit_primary(self, event: LogEvent) -> None:
        text = event.message if event.message is not None else "missing error text"
        extra: dict[str, Any] = {"severity": event.level.label}
        if event.sqlstate is not None:
            extra["sqlstate"] = event.sqlstate
        self._logger.log(event.level.to_python_level(), "%s", text, extra=extra)


__all__ = ["LogHost"]
