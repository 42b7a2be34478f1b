"""Public package surface for the log interception pipeline.

``install`` chains a filtering hook into a host's emission-hook slot; events
of the configured severity are re-emitted as multi-line records to standard
error or to ``<directory>/<SEVERITY>.log``.
"""

from __future__ import annotations

from .adapters import LogHost
from .domain import ConfigError, ConfigErrorKind, InterceptIOError, IOErrorKind, LogEvent, Severity
from .runtime import (
    RuntimeConfig,
    RuntimeSnapshot,
    get_setting,
    inspect_runtime,
    install,
    is_installed,
    reset_setting,
    set_setting,
    uninstall,
)

__all__ = [
    "ConfigError",
    "ConfigErrorKind",
    "IOErrorKind",
    "InterceptIOError",
    "LogEvent",
    "LogHost",
    "RuntimeConfig",
    "RuntimeSnapshot",
    "Severity",
    "get_setting",
    "inspect_runtime",
    "install",
    "is_installed",
    "reset_setting",
    "set_setting",
    "summary_info",
    "uninstall",
]


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point."""

    from . import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)
