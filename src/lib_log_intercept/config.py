"""Environment-driven configuration helpers.

Purpose
-------
Collect the ``LOG_INTERCEPT_*`` environment variables that override the
arguments passed to :func:`lib_log_intercept.install`, and optionally load
them from the nearest ``.env`` file.

Contents
--------
* :data:`ENV_LEVEL`, :data:`ENV_DIRECTORY`, :data:`ENV_TIMEZONE`,
  :data:`ENV_COLOR` – recognised variables.
* :func:`enable_dotenv` / :func:`should_use_dotenv` – ``.env`` support via
  ``python-dotenv``. Existing environment variables always win.
* :func:`environment_overrides` – mapping of variables present right now.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

ENV_LEVEL = "LOG_INTERCEPT_LEVEL"
ENV_DIRECTORY = "LOG_INTERCEPT_DIRECTORY"
ENV_TIMEZONE = "LOG_INTERCEPT_TIMEZONE"
ENV_COLOR = "LOG_INTERCEPT_COLOR"
DOTENV_ENV_VAR = "LOG_INTERCEPT_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}

_DOTENV_STATE: dict[str, Path | None] = {"loaded": None}


def parse_bool(value: str, *, name: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {value!r}")


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit CLI flag wins over the ``LOG_INTERCEPT_USE_DOTENV`` toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def _find_dotenv(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate.resolve()
    return None


def enable_dotenv(search_from: str | os.PathLike[str] | None = None) -> Path | None:
    """Load the nearest ``.env`` walking up from ``search_from`` (default: cwd).

    Variables already present in the environment are not overridden. Returns
    the loaded file, or ``None`` when no file was found. Repeated calls reuse
    the first result.
    """

    if _DOTENV_STATE["loaded"] is not None:
        return _DOTENV_STATE["loaded"]
    if search_from is None:
        located = find_dotenv(usecwd=True)
        found = Path(located).resolve() if located else None
    else:
        found = _find_dotenv(Path(search_from).resolve())
    if found is None:
        return None
    load_dotenv(found, override=False)
    _DOTENV_STATE["loaded"] = found
    return found


def environment_overrides(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return the ``LOG_INTERCEPT_*`` values currently set, keyed by variable."""

    source = os.environ if environ is None else environ
    keys = (ENV_LEVEL, ENV_DIRECTORY, ENV_TIMEZONE, ENV_COLOR)
    return {key: source[key] for key in keys if key in source}


def _reset_dotenv_state_for_testing() -> None:
    _DOTENV_STATE["loaded"] = None


__all__ = [
    "DOTENV_ENV_VAR",
    "ENV_COLOR",
    "ENV_DIRECTORY",
    "ENV_LEVEL",
    "ENV_TIMEZONE",
    "enable_dotenv",
    "environment_overrides",
    "parse_bool",
    "should_use_dotenv",
]
