"""Rich-backed console sink implementing :class:`SinkPort`.

Purpose
-------
Write intercepted records to standard error. Plain output is byte-for-byte
the formatted record; colour is opt-in and rendered through Rich.

Contents
--------
* :data:`_STYLE_MAP` - default severity-to-style mapping.
* :class:`RichConsoleSink` - sink used when no output directory is set.

System Role
-----------
Console branch of the sink writer. Write failures are dropped: there is no
channel left to report a broken standard error on.
"""

from __future__ import annotations

from typing import Mapping

from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style

from lib_log_intercept.application.ports.sink import SinkPort
from lib_log_intercept.domain.levels import Severity


_STYLE_MAP: Mapping[str, str] = {
    "DEBUG5": "dim",
    "DEBUG4": "dim",
    "DEBUG3": "dim",
    "DEBUG2": "dim",
    "DEBUG1": "dim",
    "LOG": "green",
    "INFO": "cyan",
    "NOTICE": "bright_cyan",
    "WARNING": "yellow",
    "ERROR": "red",
    "FATAL": "bold red",
    "PANIC": "bold white on red",
}

#: Default Rich styles keyed by severity label.


class RichConsoleSink(SinkPort):
    """Write records to standard error, optionally coloured per severity."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        colorize: bool = False,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[Severity | str, str] | None = None,
    ) -> None:
        if console is not None:
            self._console = console
        else:
            self._console = Console(stderr=True, force_terminal=True if force_color else None, no_color=no_color)
        self._colorize = colorize
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            label = key.label if isinstance(key, Severity) else str(key).strip().upper()
            merged[label] = value
        self._style_map = {label: Style.parse(value) for label, value in merged.items()}

    @property
    def console(self) -> Console:
        return self._console

    def write(self, record: str, level: Severity) -> None:
        """Write ``record``; any failure of the stream is ignored.

        Examples
        --------
        >>> from io import StringIO
        >>> buffer = StringIO()
        >>> RichConsoleSink(console=Console(file=buffer)).write("line\\n", Severity.ERROR)
        >>> buffer.getvalue()
        'line\\n'
        """

        try:
            stream = self._console.file
            stream.write(self._styled(record, level))
            stream.flush()
        except (OSError, ValueError):
            pass

    def _styled(self, record: str, level: Severity) -> str:
        # record text stays byte-for-byte; only escape codes are added
        if not self._colorize or self._no_color:
            return record
        system = self._console.color_system
        if system is None:
            return record
        style = self._style_map.get(level.label)
        if style is None:
            return record
        return style.render(record, color_system=COLOR_SYSTEMS[system])


__all__ = ["RichConsoleSink"]
