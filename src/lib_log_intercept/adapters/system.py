"""Clock and process-identity adapters backed by the running interpreter."""

from __future__ import annotations

import os
from datetime import datetime, timezone

from lib_log_intercept.application.ports import ClockPort, ProcessIdentityPort


class SystemClock(ClockPort):
    """Concrete clock port returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class OsProcessIdentity(ProcessIdentityPort):
    """Return :func:`os.getpid` at call time so forked children report their own PID."""

    def __call__(self) -> int:
        return os.getpid()


__all__ = ["OsProcessIdentity", "SystemClock"]
