"""Error taxonomy raised by the configuration gate and the file sink."""

from __future__ import annotations

import errno as _errno
import os
from enum import Enum


class ConfigErrorKind(Enum):
    """Reasons a setting value is rejected."""

    INVALID_LEVEL = "invalid_level"
    PATH_TOO_LONG = "path_too_long"
    DIRECTORY_NOT_FOUND = "directory_not_found"
    INVALID_VALUE = "invalid_value"


class ConfigError(ValueError):
    """A setting value was rejected; the previous value stays in effect.

    Attributes
    ----------
    kind:
        :class:`ConfigErrorKind` classifying the rejection.
    setting:
        Fully qualified setting name.
    detail, hint:
        Optional operator-facing explanation.
    """

    def __init__(
        self,
        kind: ConfigErrorKind,
        message: str,
        *,
        setting: str,
        detail: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.setting = setting
        self.detail = detail
        self.hint = hint

    def __str__(self) -> str:
        parts = [self.args[0]]
        if self.detail:
            parts.append(f"DETAIL: {self.detail}")
        if self.hint:
            parts.append(f"HINT: {self.hint}")
        return "\n".join(parts)


class IOErrorKind(Enum):
    """Stages at which writing an intercept log file can fail."""

    OPEN_FAILED = "open_failed"
    WRITE_FAILED = "write_failed"


class InterceptIOError(OSError):
    """Writing a record to the per-severity log file failed.

    Raised to the host rather than swallowed so a broken file sink is noticed.
    """

    def __init__(self, kind: IOErrorKind, path: str, code: int | None) -> None:
        if not code:
            code = _errno.ENOSPC
        verb = "open" if kind is IOErrorKind.OPEN_FAILED else "write"
        message = f'could not {verb} intercept log file "{path}": {os.strerror(code)}'
        super().__init__(code, message, path)
        self.kind = kind

    def __str__(self) -> str:
        return self.strerror


__all__ = ["ConfigError", "ConfigErrorKind", "IOErrorKind", "InterceptIOError"]
