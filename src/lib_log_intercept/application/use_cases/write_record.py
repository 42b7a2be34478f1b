"""Route finished records to the console or the per-severity file sink."""

from __future__ import annotations

from typing import Callable

from lib_log_intercept.application.ports import SinkPort
from lib_log_intercept.domain import Severity

FileSinkFactory = Callable[[str], SinkPort]
"""Build a file sink writing into the given directory."""


class RecordWriter:
    """Dispatch a record according to the output directory of its event.

    The directory comes from the same configuration snapshot that selected
    the event; an empty directory selects the console sink. File sinks are
    built on demand, so a directory change applies to the very next record.
    """

    def __init__(self, *, console: SinkPort, file_sink_factory: FileSinkFactory) -> None:
        self._console = console
        self._file_sink_factory = file_sink_factory

    def write(self, record: str, level: Severity, directory: str) -> None:
        if directory == "":
            self._console.write(record, level)
        else:
            self._file_sink_factory(directory).write(record, level)


__all__ = ["FileSinkFactory", "RecordWriter"]
