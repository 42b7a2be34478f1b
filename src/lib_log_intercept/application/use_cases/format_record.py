"""Render intercepted events into the multi-line text record.

Purpose
-------
Turn one :class:`LogEvent` into the human-readable record written by the
sinks. The layout mirrors the host's own server log: one line per section,
every section prefixed with ``"<timestamp> [<pid>] "``.

Contents
--------
* :func:`append_with_tabs` – continuation-line indentation.
* :func:`format_log_time` – fixed-width millisecond timestamp.
* :class:`FormattedRecord` – ordered sections of one record.
* :class:`MessageFormatter` – builds records from events.

System Role
-----------
Pure apart from reading the clock, the process id, and the statement in
flight; invoked by the interception hook only for events that passed the
filter.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo

from lib_log_intercept.application.ports import ClockPort, ProcessIdentityPort, StatementSource
from lib_log_intercept.domain import LogEvent, severity_label

MISSING_MESSAGE = "missing error text"


def append_with_tabs(text: str) -> str:
    """Return ``text`` with a tab inserted after every newline.

    Examples
    --------
    >>> append_with_tabs("first\\nsecond")
    'first\\n\\tsecond'
    """

    return text.replace("\n", "\n\t")


def format_log_time(moment: datetime, zone: tzinfo | None = None) -> str:
    """Render ``moment`` as ``YYYY-MM-DD HH:MM:SS.mmm TZ`` in ``zone``.

    ``zone`` defaults to the process's local timezone.

    Examples
    --------
    >>> from datetime import timezone
    >>> format_log_time(datetime(2025, 3, 1, 8, 5, 9, 42_999, tzinfo=timezone.utc), timezone.utc)
    '2025-03-01 08:05:09.042 UTC'
    """

    local = moment.astimezone(zone)
    return f"{local:%Y-%m-%d %H:%M:%S}.{local.microsecond // 1000:03d} {local:%Z}"


@dataclass(frozen=True, slots=True)
class FormattedRecord:
    """Ordered, newline-terminated sections of one intercepted event."""

    sections: tuple[str, ...]

    def render(self) -> str:
        return "".join(self.sections)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.sections)


class MessageFormatter:
    """Build :class:`FormattedRecord` instances for intercepted events."""

    def __init__(
        self,
        *,
        clock: ClockPort,
        process_id: ProcessIdentityPort,
        statements: StatementSource,
        zone: tzinfo | None = None,
    ) -> None:
        self._clock = clock
        self._process_id = process_id
        self._statements = statements
        self._zone = zone

    @property
    def zone(self) -> tzinfo | None:
        return self._zone

    @zone.setter
    def zone(self, value: tzinfo | None) -> None:
        self._zone = value

    def format(self, event: LogEvent) -> FormattedRecord:
        """Return the record for ``event``; sections follow a fixed order."""

        sections = [self._main_line(event)]

        detail = event.detail_log if event.detail_log is not None else event.detail
        if detail is not None:
            sections.append(self._section("DETAIL", detail))
        if event.hint is not None:
            sections.append(self._section("HINT", event.hint))
        if event.internal_query is not None:
            sections.append(self._section("QUERY", event.internal_query))
        if event.context is not None and not event.hide_context:
            sections.append(self._section("CONTEXT", event.context))

        # function and file names never contain newlines
        if event.function_name is not None and event.file_name is not None:
            sections.append(f"{self._prefix()}LOCATION:  {event.function_name}, {event.file_name}:{event.line_number}\n")
        elif event.file_name is not None:
            sections.append(f"{self._prefix()}LOCATION:  {event.file_name}:{event.line_number}\n")

        if event.backtrace is not None:
            sections.append(self._section("BACKTRACE", event.backtrace))

        # Unlike the host's own log, the statement is never hidden.
        statement = self._statements.current_statement()
        if statement is not None:
            sections.append(self._section("STATEMENT", statement))

        return FormattedRecord(tuple(sections))

    def _prefix(self) -> str:
        return f"{format_log_time(self._clock.now(), self._zone)} [{self._process_id()}] "

    def _section(self, title: str, text: str) -> str:
        return f"{self._prefix()}{title}:  {append_with_tabs(text)}\n"

    def _main_line(self, event: LogEvent) -> str:
        parts = [self._prefix(), f"{severity_label(event.level)}:  "]
        if event.sql_error_code != 0:
            parts.append(f"{event.sqlstate}:  ")
        parts.append(append_with_tabs(event.message if event.message is not None else MISSING_MESSAGE))
        if event.cursor_position > 0:
            parts.append(f" at character {event.cursor_position}")
        elif event.internal_position > 0:
            parts.append(f" at character {event.internal_position}")
        parts.append("\n")
        return "".join(parts)


__all__ = [
    "FormattedRecord",
    "MISSING_MESSAGE",
    "MessageFormatter",
    "append_with_tabs",
    "format_log_time",
]
