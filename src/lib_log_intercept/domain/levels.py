"""Severity model shared by the host adapter, the gate, and the hook.

Purpose
-------
Represent the host's severity ladder, including the two "shadow" levels
(``LOG_SERVER_ONLY`` and ``WARNING_CLIENT_ONLY``) whose output eligibility does
not follow their numeric rank.

Contents
--------
* :class:`Severity` enum with label and conversion helpers.
* :func:`is_log_level_output` – the server-log comparison used by the gate.
* :func:`parse_filter_level` / :func:`severity_label` – setting-value helpers.

System Role
-----------
Lowest layer of the package; every other module consumes these helpers rather
than comparing integers directly.
"""

from __future__ import annotations

import logging
from enum import IntEnum


class Severity(IntEnum):
    """Enumerated host severities in ascending order."""

    DEBUG5 = 10
    DEBUG4 = 11
    DEBUG3 = 12
    DEBUG2 = 13
    DEBUG1 = 14
    LOG = 15
    LOG_SERVER_ONLY = 16
    INFO = 17
    NOTICE = 18
    WARNING = 19
    WARNING_CLIENT_ONLY = 20
    ERROR = 21
    FATAL = 22
    PANIC = 23

    @property
    def label(self) -> str:
        """Return the display label used in records and file names.

        Unlike the host, each debug sub-level keeps its own label.

        Examples
        --------
        >>> Severity.DEBUG3.label
        'DEBUG3'
        >>> Severity.LOG_SERVER_ONLY.label
        'LOG'
        """

        return _LABELS[self]

    @property
    def setting_name(self) -> str:
        """Return the lowercase name accepted by the ``log_level`` setting."""

        return self.label.lower()

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant closest to this severity."""

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        normalized = name.strip().lower()
        try:
            return _SETTING_NAMES[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "Severity":
        """Translate a stdlib logging level integer into :class:`Severity`."""

        if level >= logging.CRITICAL:
            return cls.FATAL
        if level >= logging.ERROR:
            return cls.ERROR
        if level >= logging.WARNING:
            return cls.WARNING
        if level >= logging.INFO:
            return cls.INFO
        return cls.DEBUG1


_LABELS = {
    Severity.DEBUG5: "DEBUG5",
    Severity.DEBUG4: "DEBUG4",
    Severity.DEBUG3: "DEBUG3",
    Severity.DEBUG2: "DEBUG2",
    Severity.DEBUG1: "DEBUG1",
    Severity.LOG: "LOG",
    Severity.LOG_SERVER_ONLY: "LOG",
    Severity.INFO: "INFO",
    Severity.NOTICE: "NOTICE",
    Severity.WARNING: "WARNING",
    Severity.WARNING_CLIENT_ONLY: "WARNING",
    Severity.ERROR: "ERROR",
    Severity.FATAL: "FATAL",
    Severity.PANIC: "PANIC",
}

# Values accepted by the ``log_level`` setting; "debug" is a hidden alias.
_SETTING_NAMES = {
    "debug5": Severity.DEBUG5,
    "debug4": Severity.DEBUG4,
    "debug3": Severity.DEBUG3,
    "debug2": Severity.DEBUG2,
    "debug1": Severity.DEBUG1,
    "debug": Severity.DEBUG2,
    "info": Severity.INFO,
    "notice": Severity.NOTICE,
    "warning": Severity.WARNING,
    "error": Severity.ERROR,
    "log": Severity.LOG,
    "fatal": Severity.FATAL,
    "panic": Severity.PANIC,
}

_PYTHON_LEVELS = {
    Severity.DEBUG5: logging.DEBUG,
    Severity.DEBUG4: logging.DEBUG,
    Severity.DEBUG3: logging.DEBUG,
    Severity.DEBUG2: logging.DEBUG,
    Severity.DEBUG1: logging.DEBUG,
    Severity.LOG: logging.INFO,
    Severity.LOG_SERVER_ONLY: logging.INFO,
    Severity.INFO: logging.INFO,
    Severity.NOTICE: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.WARNING_CLIENT_ONLY: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.FATAL: logging.CRITICAL,
    Severity.PANIC: logging.CRITICAL,
}

DISABLED_SETTING = "none"
"""Setting value that switches interception off."""

LOG_LEVEL_CHOICES: tuple[str, ...] = (
    "debug5",
    "debug4",
    "debug3",
    "debug2",
    "debug1",
    "info",
    "notice",
    "warning",
    "error",
    "log",
    "fatal",
    "panic",
    DISABLED_SETTING,
)
"""Documented values of the ``log_level`` setting, in display order."""


def is_log_level_output(level: int, threshold: int) -> bool:
    """Return whether ``level`` would reach a server log gated at ``threshold``.

    ``LOG`` sorts out of order, between ``ERROR`` and ``FATAL``: ordinary log
    messages are kept whenever anything at or above ``ERROR`` is captured.
    ``WARNING_CLIENT_ONLY`` never reaches the server log.

    Examples
    --------
    >>> is_log_level_output(Severity.LOG, Severity.ERROR)
    True
    >>> is_log_level_output(Severity.DEBUG1, Severity.LOG)
    False
    >>> is_log_level_output(Severity.FATAL, Severity.LOG)
    True
    """

    if level in (Severity.LOG, Severity.LOG_SERVER_ONLY):
        if threshold == Severity.LOG or threshold <= Severity.ERROR:
            return True
    elif level == Severity.WARNING_CLIENT_ONLY:
        return False
    elif threshold == Severity.LOG:
        if level >= Severity.FATAL:
            return True
    elif level >= threshold:
        return True
    return False


def severity_label(level: int) -> str:
    """Return the label for ``level`` or ``"???"`` for unknown values."""

    try:
        return Severity(level).label
    except ValueError:
        return "???"


def parse_filter_level(value: "str | Severity | None") -> Severity | None:
    """Parse a ``log_level`` setting value; ``"none"`` disables interception.

    Examples
    --------
    >>> parse_filter_level("none") is None
    True
    >>> parse_filter_level("Debug")
    <Severity.DEBUG2: 13>
    """

    if value is None or isinstance(value, Severity):
        return value
    if value.strip().lower() == DISABLED_SETTING:
        return None
    return Severity.from_name(value)


def filter_level_name(level: Severity | None) -> str:
    """Return the setting value representing ``level``."""

    return DISABLED_SETTING if level is None else level.setting_name


__all__ = [
    "DISABLED_SETTING",
    "LOG_LEVEL_CHOICES",
    "Severity",
    "filter_level_name",
    "is_log_level_output",
    "parse_filter_level",
    "severity_label",
]
