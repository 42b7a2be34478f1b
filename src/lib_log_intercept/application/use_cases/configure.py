"""Configuration gate validating new filter settings before they take effect.

Purpose
-------
Reject setting values that would make the intercept sink useless or unsafe:
a filter level the host never emits, or an output directory that is missing
or too long to hold a per-severity file name.

Contents
--------
* :func:`check_filter_level` / :func:`check_output_directory` – pure validators
  used by the settings registry before it commits a value.
* :class:`ConfigurationGate` – validated setters over a :class:`FilterConfig`.

System Role
-----------
The only writer of :class:`~lib_log_intercept.domain.config.FilterConfig`. On
failure nothing is stored, so the previously accepted value remains active.
"""

from __future__ import annotations

import logging
import os
import stat

from lib_log_intercept.application.ports import ThresholdSource
from lib_log_intercept.domain import ConfigError, ConfigErrorKind, FilterConfig, Severity, is_log_level_output

logger = logging.getLogger(__name__)

LOG_LEVEL_SETTING = "lib_log_intercept.log_level"
LOG_DIRECTORY_SETTING = "lib_log_intercept.log_directory"

MAX_PATH = 1024
"""Longest path the host accepts, including the terminating byte."""

FILE_NAME_RESERVE = 64
"""Room kept for ``/<LABEL>.log`` below :data:`MAX_PATH`."""


def check_filter_level(requested: Severity | None, threshold: Severity) -> None:
    """Raise :class:`ConfigError` when the host would never emit ``requested``.

    ``None`` (interception disabled) is always accepted.

    Examples
    --------
    >>> check_filter_level(Severity.ERROR, Severity.WARNING)
    >>> try:
    ...     check_filter_level(Severity.DEBUG2, Severity.LOG)
    ... except ConfigError as exc:
    ...     print(exc.kind.value)
    invalid_level
    """

    if requested is None:
        return
    if not is_log_level_output(requested, threshold):
        raise ConfigError(
            ConfigErrorKind.INVALID_LEVEL,
            f'cannot set "{LOG_LEVEL_SETTING}" to more than the level at which the host emits logs',
            setting=LOG_LEVEL_SETTING,
            hint=f'You can increase the host\'s log level by setting "log_min_messages" to at least "{LOG_LEVEL_SETTING}".',
        )


def check_output_directory(path: str) -> None:
    """Raise :class:`ConfigError` unless ``path`` is empty or an existing directory.

    The length limit counts encoded bytes. Any failure to stat the path
    (missing, unreadable parent, component too long) counts as missing.
    """

    if not path:
        return
    if len(os.fsencode(path)) + FILE_NAME_RESERVE + 2 >= MAX_PATH:
        raise ConfigError(
            ConfigErrorKind.PATH_TOO_LONG,
            f'invalid value for parameter "{LOG_DIRECTORY_SETTING}"',
            setting=LOG_DIRECTORY_SETTING,
            detail="intercept log directory too long",
        )
    try:
        mode = os.stat(path).st_mode
    except (OSError, ValueError):
        mode = 0
    if not stat.S_ISDIR(mode):
        raise ConfigError(
            ConfigErrorKind.DIRECTORY_NOT_FOUND,
            f'invalid value for parameter "{LOG_DIRECTORY_SETTING}": "{path}"',
            setting=LOG_DIRECTORY_SETTING,
            detail="specified intercept log directory does not exist",
        )


class ConfigurationGate:
    """Validated setters for the filter level and the output directory."""

    def __init__(self, config: FilterConfig, threshold: ThresholdSource) -> None:
        self._config = config
        self._threshold = threshold

    @property
    def config(self) -> FilterConfig:
        return self._config

    def set_filter_level(self, requested: Severity | None, threshold: Severity | None = None) -> None:
        """Store ``requested`` after checking it against the live threshold.

        ``threshold`` overrides the host's current value; callers normally
        leave it unset.
        """

        live = self._threshold.current_threshold() if threshold is None else threshold
        check_filter_level(requested, live)
        self._config.store_filter_level(requested)
        logger.debug("intercept filter level set to %s", "none" if requested is None else requested.label)

    def set_output_directory(self, path: str) -> None:
        check_output_directory(path)
        self._config.store_output_directory(path)
        logger.debug("intercept output directory set to %r", path)


__all__ = [
    "ConfigurationGate",
    "FILE_NAME_RESERVE",
    "LOG_DIRECTORY_SETTING",
    "LOG_LEVEL_SETTING",
    "MAX_PATH",
    "check_filter_level",
    "check_output_directory",
]
