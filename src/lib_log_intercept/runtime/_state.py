"""Process-wide slot holding the installed interception runtime."""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock

from lib_log_intercept.adapters.console.rich_console import RichConsoleSink
from lib_log_intercept.application.ports import InterceptHost
from lib_log_intercept.application.use_cases import ConfigurationGate, InterceptHook, MessageFormatter
from lib_log_intercept.domain import FilterConfig

from ._settings import SettingsRegistry


@dataclass(slots=True)
class InterceptRuntime:
    """Aggregate of live collaborators assembled by the composition root."""

    host: InterceptHost
    hook: InterceptHook
    gate: ConfigurationGate
    filter_config: FilterConfig
    formatter: MessageFormatter
    console: RichConsoleSink
    settings: SettingsRegistry


class RuntimeSlot:
    """Hold at most one :class:`InterceptRuntime` per process.

    ``claim`` checks and stores under one lock, so two threads racing through
    :func:`lib_log_intercept.install` cannot both succeed.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._runtime: InterceptRuntime | None = None

    @property
    def occupied(self) -> bool:
        with self._lock:
            return self._runtime is not None

    def claim(self, runtime: InterceptRuntime) -> None:
        with self._lock:
            if self._runtime is not None:
                raise RuntimeError(
                    "lib_log_intercept.install() cannot be called twice without uninstall(); call lib_log_intercept.uninstall() first",
                )
            self._runtime = runtime

    def release(self) -> InterceptRuntime | None:
        """Empty the slot and hand back what it held."""

        with self._lock:
            runtime, self._runtime = self._runtime, None
            return runtime

    def require(self) -> InterceptRuntime:
        with self._lock:
            if self._runtime is None:
                raise RuntimeError("lib_log_intercept.install() must be called before using the interception API")
            return self._runtime


RUNTIME_SLOT = RuntimeSlot()


__all__ = ["InterceptRuntime", "RUNTIME_SLOT", "RuntimeSlot"]
