"""Runtime façade that installs the interception pipeline into a host.

Purpose
-------
Expose a stable entry point (`install`, `uninstall`, `set_setting`,
`get_setting`, `inspect_runtime`) that host applications use instead of
importing the inner layers directly.

Contents
--------
* ``install`` / ``uninstall`` – lifecycle calls chaining into the host's hook
  slot and restoring it.
* ``set_setting`` / ``get_setting`` / ``reset_setting`` – named settings,
  validated before they are committed.
* ``inspect_runtime`` – read-only snapshot of the active configuration.

System Role
-----------
Outer shell over the application layer. One runtime is active per process.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

from lib_log_intercept.application.ports import ClockPort, InterceptHost, ProcessIdentityPort
from lib_log_intercept.domain import Severity

from ._composition import build_runtime
from ._settings import (
    LOG_DIRECTORY_SETTING,
    LOG_LEVEL_SETTING,
    LOG_TIMEZONE_SETTING,
    RuntimeConfig,
    build_runtime_settings,
)
from ._state import RUNTIME_SLOT, InterceptRuntime, RuntimeSlot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active interception runtime."""

    filter_level: Severity | None
    output_directory: str
    log_timezone: str
    hook_installed: bool
    chained: bool


__all__ = [
    "InterceptRuntime",
    "LOG_DIRECTORY_SETTING",
    "LOG_LEVEL_SETTING",
    "LOG_TIMEZONE_SETTING",
    "RuntimeConfig",
    "RuntimeSlot",
    "RuntimeSnapshot",
    "current_runtime",
    "get_setting",
    "inspect_runtime",
    "install",
    "is_installed",
    "reset_setting",
    "set_setting",
    "uninstall",
]


def install(
    host: InterceptHost,
    config: RuntimeConfig | None = None,
    *,
    clock: ClockPort | None = None,
    process_id: ProcessIdentityPort | None = None,
    **overrides: Any,
) -> InterceptRuntime:
    """Compose the pipeline and install its hook into ``host``.

    Why
    ---
    Hosts call ``install`` once at start-up. The previously installed hook is
    saved and keeps being called for every event.

    Inputs
    ------
    host:
        Object offering the hook slot, the live threshold and the current
        statement (see :class:`~lib_log_intercept.application.ports.InterceptHost`).
    config:
        :class:`RuntimeConfig`; keyword ``overrides`` replace individual
        fields. ``LOG_INTERCEPT_*`` environment variables override both.
    clock, process_id:
        Optional replacements for the system clock and PID lookup.

    Side Effects
    ------------
    Raises :class:`RuntimeError` when a runtime is already installed and
    :class:`~lib_log_intercept.domain.ConfigError` when a setting is invalid;
    in both cases the host's hook slot is left untouched.
    """

    base = config if config is not None else RuntimeConfig()
    if overrides:
        base = replace(base, **overrides)
    settings = build_runtime_settings(base)
    runtime = build_runtime(host, settings, clock=clock, process_id=process_id)
    RUNTIME_SLOT.claim(runtime)
    runtime.hook.install(host)
    logger.debug("interception runtime installed")
    return runtime


def uninstall() -> None:
    """Restore the host's previous hook and drop the runtime; no-op when idle."""

    runtime = RUNTIME_SLOT.release()
    if runtime is None:
        return
    runtime.hook.uninstall()
    logger.debug("interception runtime uninstalled")


def is_installed() -> bool:
    """Return ``True`` while an interception runtime is installed."""

    return RUNTIME_SLOT.occupied


def current_runtime() -> InterceptRuntime:
    return RUNTIME_SLOT.require()


def set_setting(name: str, value: str | Severity) -> None:
    """Validate and commit a setting such as ``"log_level"`` or ``"log_directory"``."""

    RUNTIME_SLOT.require().settings.set(name, value)


def get_setting(name: str) -> str:
    return RUNTIME_SLOT.require().settings.get(name)


def reset_setting(name: str) -> None:
    RUNTIME_SLOT.require().settings.reset(name)


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the current runtime state."""

    runtime = RUNTIME_SLOT.require()
    snapshot = runtime.filter_config.snapshot()
    return RuntimeSnapshot(
        filter_level=snapshot.filter_level,
        output_directory=snapshot.output_directory,
        log_timezone=runtime.settings.get(LOG_TIMEZONE_SETTING),
        hook_installed=runtime.hook.installed,
        chained=runtime.hook.previous is not None,
    )
