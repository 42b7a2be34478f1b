"""Runtime configuration and the named-settings registry.

Purpose
-------
Resolve install-time options (arguments plus ``LOG_INTERCEPT_*`` environment
overrides) and expose the live settings under their public names, each change
validated synchronously before it is committed.

Contents
--------
* :class:`RuntimeConfig` – options accepted by :func:`lib_log_intercept.install`.
* :func:`build_runtime_settings` – apply environment overrides.
* :class:`Setting` / :class:`SettingsRegistry` – named, validated settings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import tzinfo
from threading import RLock
from typing import Callable, Iterator, Mapping
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from rich.console import Console

from lib_log_intercept import config as env_config
from lib_log_intercept.application.use_cases.configure import LOG_DIRECTORY_SETTING, LOG_LEVEL_SETTING
from lib_log_intercept.domain import ConfigError, ConfigErrorKind
from lib_log_intercept.domain.levels import DISABLED_SETTING, LOG_LEVEL_CHOICES, Severity, parse_filter_level

logger = logging.getLogger(__name__)

SETTING_PREFIX = "lib_log_intercept."
LOG_TIMEZONE_SETTING = "lib_log_intercept.log_timezone"


@dataclass(frozen=True)
class RuntimeConfig:
    """Options for :func:`lib_log_intercept.install`.

    Attributes
    ----------
    log_level:
        Severity to intercept, as a setting value (``"error"``) or
        :class:`Severity`; ``"none"`` disables interception.
    log_directory:
        Directory for ``<LABEL>.log`` files; empty selects standard error.
    log_timezone:
        IANA zone name used for record timestamps; empty means local time.
    colorize, force_color, no_color:
        Console colour controls (plain output by default).
    console:
        Explicit Rich console, mainly for tests.
    """

    log_level: str | Severity = DISABLED_SETTING
    log_directory: str = ""
    log_timezone: str = ""
    colorize: bool = False
    force_color: bool = False
    no_color: bool = False
    console: Console | None = None


def build_runtime_settings(config: RuntimeConfig | None = None, environ: Mapping[str, str] | None = None) -> RuntimeConfig:
    """Return ``config`` with ``LOG_INTERCEPT_*`` environment overrides applied."""

    resolved = config if config is not None else RuntimeConfig()
    overrides = env_config.environment_overrides(environ)
    changes: dict[str, object] = {}
    if env_config.ENV_LEVEL in overrides:
        changes["log_level"] = overrides[env_config.ENV_LEVEL].strip()
    if env_config.ENV_DIRECTORY in overrides:
        changes["log_directory"] = overrides[env_config.ENV_DIRECTORY]
    if env_config.ENV_TIMEZONE in overrides:
        changes["log_timezone"] = overrides[env_config.ENV_TIMEZONE].strip()
    if env_config.ENV_COLOR in overrides:
        changes["colorize"] = env_config.parse_bool(overrides[env_config.ENV_COLOR], name=env_config.ENV_COLOR)
    return replace(resolved, **changes) if changes else resolved


def parse_level_setting(value: str | Severity) -> Severity | None:
    """Parse a ``log_level`` value, raising :class:`ConfigError` when unknown."""

    try:
        return parse_filter_level(value)
    except ValueError as exc:
        raise ConfigError(
            ConfigErrorKind.INVALID_VALUE,
            f'invalid value for parameter "{LOG_LEVEL_SETTING}": "{value}"',
            setting=LOG_LEVEL_SETTING,
            hint="Available values: " + ", ".join(LOG_LEVEL_CHOICES) + ".",
        ) from exc


def parse_timezone_setting(value: str) -> tzinfo | None:
    """Parse a ``log_timezone`` value; empty selects the local timezone."""

    if not value:
        return None
    try:
        return ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigError(
            ConfigErrorKind.INVALID_VALUE,
            f'invalid value for parameter "{LOG_TIMEZONE_SETTING}": "{value}"',
            setting=LOG_TIMEZONE_SETTING,
            detail="time zone is not recognized",
        ) from exc


@dataclass
class Setting:
    """One named setting: default, description, and validating assignment.

    ``apply`` validates and commits a value in one step; it raises
    :class:`ConfigError` without side effects when the value is rejected.
    """

    name: str
    default: str
    short_description: str
    long_description: str
    apply: Callable[[str], None]
    value: str = ""


class SettingsRegistry:
    """Named settings under the reserved ``lib_log_intercept.`` prefix."""

    def __init__(self) -> None:
        self._settings: dict[str, Setting] = {}
        self._lock = RLock()

    def define(self, setting: Setting) -> None:
        """Register ``setting`` and apply its default value."""

        if not setting.name.startswith(SETTING_PREFIX):
            raise ValueError(f"setting {setting.name!r} must use the {SETTING_PREFIX!r} prefix")
        with self._lock:
            if setting.name in self._settings:
                raise ValueError(f"setting {setting.name!r} is already defined")
            setting.apply(setting.default)
            setting.value = setting.default
            self._settings[setting.name] = setting

    def set(self, name: str, value: str | Severity) -> None:
        """Validate and commit ``value``; the old value survives a rejection."""

        text = value.setting_name if isinstance(value, Severity) else str(value)
        with self._lock:
            setting = self._lookup(name)
            setting.apply(text)
            setting.value = text
        logger.debug("setting %s changed to %r", name, text)

    def get(self, name: str) -> str:
        with self._lock:
            return self._lookup(name).value

    def reset(self, name: str) -> None:
        with self._lock:
            setting = self._lookup(name)
        self.set(name, setting.default)

    def describe(self, name: str) -> Setting:
        with self._lock:
            return self._lookup(name)

    def names(self) -> Iterator[str]:
        with self._lock:
            return iter(sorted(self._settings))

    def _lookup(self, name: str) -> Setting:
        key = name if name.startswith(SETTING_PREFIX) else SETTING_PREFIX + name
        try:
            return self._settings[key]
        except KeyError as exc:
            raise KeyError(f'unrecognized configuration parameter "{name}"') from exc


__all__ = [
    "LOG_DIRECTORY_SETTING",
    "LOG_LEVEL_SETTING",
    "LOG_TIMEZONE_SETTING",
    "RuntimeConfig",
    "SETTING_PREFIX",
    "Setting",
    "SettingsRegistry",
    "build_runtime_settings",
    "parse_level_setting",
    "parse_timezone_setting",
]
