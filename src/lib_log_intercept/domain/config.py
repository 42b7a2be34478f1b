"""Process-wide filter configuration read by the interception hook."""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock

from .levels import Severity


@dataclass(frozen=True, slots=True)
class FilterSnapshot:
    """Consistent view of :class:`FilterConfig` taken at one instant."""

    filter_level: Severity | None
    output_directory: str

    @property
    def enabled(self) -> bool:
        return self.filter_level is not None

    @property
    def uses_console(self) -> bool:
        return self.output_directory == ""


class FilterConfig:
    """Mutable holder for the intercepted level and the output directory.

    Only the configuration gate assigns new values, after validation. Reads
    and writes are serialised so a multi-threaded host never observes a torn
    pair. Defaults: interception disabled, console output.
    """

    def __init__(self, filter_level: Severity | None = None, output_directory: str = "") -> None:
        self._lock = RLock()
        self._filter_level = filter_level
        self._output_directory = output_directory

    @property
    def filter_level(self) -> Severity | None:
        with self._lock:
            return self._filter_level

    @property
    def output_directory(self) -> str:
        with self._lock:
            return self._output_directory

    def store_filter_level(self, level: Severity | None) -> None:
        with self._lock:
            self._filter_level = level

    def store_output_directory(self, path: str) -> None:
        with self._lock:
            self._output_directory = path

    def snapshot(self) -> FilterSnapshot:
        with self._lock:
            return FilterSnapshot(self._filter_level, self._output_directory)

    def __repr__(self) -> str:
        snap = self.snapshot()
        return f"FilterConfig(filter_level={snap.filter_level!r}, output_directory={snap.output_directory!r})"


__all__ = ["FilterConfig", "FilterSnapshot"]
