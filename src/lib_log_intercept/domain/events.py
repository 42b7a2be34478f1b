"""Domain event describing one host log message.

Purpose
-------
Provide an immutable snapshot of everything the host knows about a log event
when it calls the emission hook.

Contents
--------
* :class:`LogEvent` dataclass with small presentation helpers.

System Role
-----------
Owned by the host and read-only for the interception pipeline; the formatter
reads it field by field and nothing downstream mutates it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .levels import Severity
from .sqlstate import make_sqlstate, unpack_sqlstate


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable log event handed to emission hooks.

    Attributes
    ----------
    level:
        :class:`Severity` of the event.
    message:
        Primary message text; ``None`` when the host lost it.
    sql_error_code:
        Packed SQLSTATE (see :mod:`lib_log_intercept.domain.sqlstate`); ``0``
        means no code.
    detail, detail_log:
        Client-facing and server-log detail; the log variant wins when both
        are present.
    hint, internal_query, context:
        Optional supplementary sections.
    hide_context:
        Suppresses the context section even when ``context`` is set.
    function_name, file_name, line_number:
        Source location of the report.
    backtrace:
        Optional backtrace captured by the host.
    cursor_position, internal_position:
        1-based character offsets into the statement or internal query; ``0``
        means unknown.
    """

    level: Severity
    message: str | None
    sql_error_code: int = 0
    detail: str | None = None
    detail_log: str | None = None
    hint: str | None = None
    internal_query: str | None = None
    context: str | None = None
    hide_context: bool = False
    function_name: str | None = None
    file_name: str | None = None
    line_number: int = 0
    backtrace: str | None = None
    cursor_position: int = 0
    internal_position: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.level, Severity):
            object.__setattr__(self, "level", Severity(self.level))
        if self.sql_error_code < 0:
            raise ValueError("sql_error_code must not be negative")

    @property
    def sqlstate(self) -> str | None:
        """Return the unpacked SQLSTATE or ``None`` when no code is set."""

        if self.sql_error_code == 0:
            return None
        return unpack_sqlstate(self.sql_error_code)

    @classmethod
    def with_sqlstate(cls, level: Severity, message: str | None, sqlstate: str, **fields: Any) -> "LogEvent":
        """Build an event from a textual SQLSTATE such as ``"22012"``."""

        return cls(level=level, message=message, sql_error_code=make_sqlstate(sqlstate), **fields)

    def replace(self, **changes: Any) -> "LogEvent":
        """Return a copied event with ``changes`` applied."""

        return replace(self, **changes)


__all__ = ["LogEvent"]
