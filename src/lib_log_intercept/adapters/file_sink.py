"""Append-only per-severity log files.

Records for an event of severity ``X`` go to ``<directory>/<X label>.log``.
Files are created on first use with owner-only permissions and never
truncated or rotated.
"""

from __future__ import annotations

import os
from pathlib import Path

from lib_log_intercept.application.ports.sink import SinkPort
from lib_log_intercept.domain.errors import InterceptIOError, IOErrorKind
from lib_log_intercept.domain.levels import Severity, severity_label

FILE_CREATE_MODE = 0o600
_OPEN_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_APPEND | getattr(os, "O_BINARY", 0)


class SeverityFileSink(SinkPort):
    """Write each record with a single append to the severity's file."""

    def __init__(self, directory: str | os.PathLike[str], *, encoding: str = "utf-8", mode: int = FILE_CREATE_MODE) -> None:
        self._directory = os.fspath(directory)
        self._encoding = encoding
        self._mode = mode

    @property
    def directory(self) -> str:
        return self._directory

    def path_for(self, level: Severity) -> Path:
        return Path(f"{self._directory}/{severity_label(level)}.log")

    def write(self, record: str, level: Severity) -> None:
        """Append ``record``; raise :class:`InterceptIOError` on any failure."""

        path = self.path_for(level)
        payload = record.encode(self._encoding, errors="replace")
        try:
            fd = os.open(path, _OPEN_FLAGS, self._mode)
        except OSError as exc:
            raise InterceptIOError(IOErrorKind.OPEN_FAILED, str(path), exc.errno) from exc
        try:
            try:
                written = os.write(fd, payload)
            except OSError as exc:
                raise InterceptIOError(IOErrorKind.WRITE_FAILED, str(path), exc.errno) from exc
            if written != len(payload):
                raise InterceptIOError(IOErrorKind.WRITE_FAILED, str(path), None)
        finally:
            os.close(fd)


__all__ = ["FILE_CREATE_MODE", "SeverityFileSink"]
