from __future__ import annotations

import logging

import pytest

from lib_log_intercept.domain.levels import (
    Severity,
    filter_level_name,
    is_log_level_output,
    parse_filter_level,
    severity_label,
)

_NON_LOG_LEVELS = [level for level in Severity if level not in (Severity.LOG, Severity.LOG_SERVER_ONLY)]


@pytest.mark.parametrize("level", [Severity.LOG, Severity.LOG_SERVER_ONLY])
@pytest.mark.parametrize("threshold", list(Severity))
def test_log_class_is_output_at_log_or_error_and_below(level: Severity, threshold: Severity) -> None:
    expected = threshold == Severity.LOG or threshold <= Severity.ERROR
    assert is_log_level_output(level, threshold) is expected


def test_log_is_output_when_error_is_captured() -> None:
    assert is_log_level_output(Severity.LOG, Severity.ERROR) is True


def test_log_is_not_output_above_error() -> None:
    assert is_log_level_output(Severity.LOG, Severity.FATAL) is False
    assert is_log_level_output(Severity.LOG, Severity.PANIC) is False


@pytest.mark.parametrize("threshold", list(Severity))
def test_client_only_warning_is_never_output(threshold: Severity) -> None:
    assert is_log_level_output(Severity.WARNING_CLIENT_ONLY, threshold) is False


@pytest.mark.parametrize("level", [level for level in _NON_LOG_LEVELS if level != Severity.WARNING_CLIENT_ONLY])
def test_log_threshold_only_passes_fatal_and_above(level: Severity) -> None:
    assert is_log_level_output(level, Severity.LOG) is (level >= Severity.FATAL)


def test_debug1_with_log_threshold_is_not_output() -> None:
    assert is_log_level_output(Severity.DEBUG1, Severity.LOG) is False


@pytest.mark.parametrize(
    "level, threshold, expected",
    [
        (Severity.DEBUG2, Severity.DEBUG2, True),
        (Severity.DEBUG2, Severity.DEBUG3, True),
        (Severity.DEBUG2, Severity.DEBUG1, False),
        (Severity.ERROR, Severity.WARNING, True),
        (Severity.WARNING, Severity.ERROR, False),
        (Severity.NOTICE, Severity.INFO, True),
        (Severity.PANIC, Severity.FATAL, True),
    ],
)
def test_plain_levels_compare_numerically(level: Severity, threshold: Severity, expected: bool) -> None:
    assert is_log_level_output(level, threshold) is expected


@pytest.mark.parametrize(
    "level, label",
    [
        (Severity.DEBUG5, "DEBUG5"),
        (Severity.DEBUG4, "DEBUG4"),
        (Severity.DEBUG3, "DEBUG3"),
        (Severity.DEBUG2, "DEBUG2"),
        (Severity.DEBUG1, "DEBUG1"),
        (Severity.LOG, "LOG"),
        (Severity.LOG_SERVER_ONLY, "LOG"),
        (Severity.INFO, "INFO"),
        (Severity.NOTICE, "NOTICE"),
        (Severity.WARNING, "WARNING"),
        (Severity.WARNING_CLIENT_ONLY, "WARNING"),
        (Severity.ERROR, "ERROR"),
        (Severity.FATAL, "FATAL"),
        (Severity.PANIC, "PANIC"),
    ],
)
def test_label_table(level: Severity, label: str) -> None:
    assert level.label == label
    assert severity_label(int(level)) == label


def test_unknown_numeric_label_is_question_marks() -> None:
    assert severity_label(99) == "???"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug5", Severity.DEBUG5),
        ("DEBUG1", Severity.DEBUG1),
        ("debug", Severity.DEBUG2),
        (" Warning ", Severity.WARNING),
        ("log", Severity.LOG),
        ("panic", Severity.PANIC),
    ],
)
def test_from_name_accepts_setting_values(name: str, expected: Severity) -> None:
    assert Severity.from_name(name) is expected


def test_from_name_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        Severity.from_name("verbose")


def test_parse_filter_level_maps_none_to_disabled() -> None:
    assert parse_filter_level("none") is None
    assert parse_filter_level("NONE") is None
    assert parse_filter_level(None) is None
    assert parse_filter_level(Severity.ERROR) is Severity.ERROR


def test_filter_level_name_round_trips_through_setting_values() -> None:
    assert filter_level_name(None) == "none"
    assert filter_level_name(Severity.DEBUG3) == "debug3"


@pytest.mark.parametrize(
    "python_level, expected",
    [
        (logging.DEBUG, Severity.DEBUG1),
        (logging.INFO, Severity.INFO),
        (logging.WARNING, Severity.WARNING),
        (logging.ERROR, Severity.ERROR),
        (logging.CRITICAL, Severity.FATAL),
    ],
)
def test_from_python_level(python_level: int, expected: Severity) -> None:
    assert Severity.from_python_level(python_level) is expected


@pytest.mark.parametrize("level", list(Severity))
def test_to_python_level_returns_logging_constant(level: Severity) -> None:
    assert level.to_python_level() in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL)
