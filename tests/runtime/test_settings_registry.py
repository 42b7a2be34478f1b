from __future__ import annotations

import pytest

from lib_log_intercept.domain import ConfigError, ConfigErrorKind, Severity
from lib_log_intercept.runtime._settings import (
    RuntimeConfig,
    Setting,
    SettingsRegistry,
    build_runtime_settings,
    parse_level_setting,
)


def _only_digits(applied: list[str]):
    def apply(value: str) -> None:
        if not value.isdigit():
            raise ConfigError(ConfigErrorKind.INVALID_VALUE, f"bad value {value!r}", setting="lib_log_intercept.count")
        applied.append(value)

    return apply


@pytest.fixture
def registry() -> tuple[SettingsRegistry, list[str]]:
    applied: list[str] = []
    settings = SettingsRegistry()
    settings.define(Setting("lib_log_intercept.count", "1", "Count.", "A number.", _only_digits(applied)))
    return settings, applied


def test_define_applies_the_default(registry) -> None:
    settings, applied = registry
    assert applied == ["1"]
    assert settings.get("count") == "1"


def test_rejected_value_is_not_committed(registry) -> None:
    settings, applied = registry
    settings.set("count", "5")
    with pytest.raises(ConfigError):
        settings.set("lib_log_intercept.count", "five")
    assert settings.get("count") == "5"
    assert applied == ["1", "5"]


def test_reset_restores_default(registry) -> None:
    settings, _ = registry
    settings.set("count", "9")
    settings.reset("count")
    assert settings.get("count") == "1"


def test_describe_and_names(registry) -> None:
    settings, _ = registry
    assert settings.describe("count").short_description == "Count."
    assert list(settings.names()) == ["lib_log_intercept.count"]


def test_prefix_is_required() -> None:
    with pytest.raises(ValueError, match="prefix"):
        SettingsRegistry().define(Setting("count", "1", "", "", lambda value: None))


def test_duplicate_definition_is_rejected(registry) -> None:
    settings, _ = registry
    with pytest.raises(ValueError, match="already defined"):
        settings.define(Setting("lib_log_intercept.count", "1", "", "", lambda value: None))


def test_unknown_name(registry) -> None:
    settings, _ = registry
    with pytest.raises(KeyError):
        settings.set("missing", "1")


def test_severity_values_are_stored_by_setting_name() -> None:
    applied: list[str] = []
    settings = SettingsRegistry()
    settings.define(Setting("lib_log_intercept.log_level", "none", "", "", applied.append))
    settings.set("log_level", Severity.DEBUG3)
    assert settings.get("log_level") == "debug3"
    assert applied == ["none", "debug3"]


def test_parse_level_setting_lists_choices() -> None:
    assert parse_level_setting("NONE") is None
    with pytest.raises(ConfigError) as excinfo:
        parse_level_setting("loud")
    assert excinfo.value.kind is ConfigErrorKind.INVALID_VALUE
    assert "debug5" in (excinfo.value.hint or "")


def test_build_runtime_settings_reads_the_environment() -> None:
    environ = {
        "LOG_INTERCEPT_LEVEL": " warning ",
        "LOG_INTERCEPT_DIRECTORY": "/var/log/pg",
        "LOG_INTERCEPT_TIMEZONE": "UTC",
        "LOG_INTERCEPT_COLOR": "yes",
    }
    resolved = build_runtime_settings(RuntimeConfig(log_level="error"), environ)
    assert resolved.log_level == "warning"
    assert resolved.log_directory == "/var/log/pg"
    assert resolved.log_timezone == "UTC"
    assert resolved.colorize is True


def test_build_runtime_settings_without_overrides_returns_input() -> None:
    config = RuntimeConfig(log_level="error")
    assert build_runtime_settings(config, {}) is config
