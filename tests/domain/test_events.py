from __future__ import annotations

import dataclasses

import pytest

from lib_log_intercept.domain.events import LogEvent
from lib_log_intercept.domain.levels import Severity
from lib_log_intercept.domain.sqlstate import make_sqlstate, unpack_sqlstate


@pytest.mark.parametrize("code", ["22012", "42P01", "XX000", "57014", "0A000"])
def test_sqlstate_packing_is_reversible(code: str) -> None:
    assert unpack_sqlstate(make_sqlstate(code)) == code


def test_sqlstate_packs_first_character_in_low_bits() -> None:
    assert make_sqlstate("10000") == 1
    assert make_sqlstate("01000") == 1 << 6


def test_make_sqlstate_rejects_wrong_length() -> None:
    with pytest.raises(ValueError, match="5 characters"):
        make_sqlstate("2201")


def test_event_is_immutable() -> None:
    event = LogEvent(Severity.ERROR, "boom")
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.message = "changed"  # type: ignore[misc]


def test_event_coerces_integer_level() -> None:
    event = LogEvent(21, "boom")  # type: ignore[arg-type]
    assert event.level is Severity.ERROR


def test_event_sqlstate_property() -> None:
    assert LogEvent(Severity.ERROR, "boom").sqlstate is None
    assert LogEvent.with_sqlstate(Severity.ERROR, "boom", "22012").sqlstate == "22012"


def test_event_rejects_negative_sql_error_code() -> None:
    with pytest.raises(ValueError, match="sql_error_code"):
        LogEvent(Severity.ERROR, "boom", sql_error_code=-1)


def test_replace_returns_modified_copy() -> None:
    original = LogEvent(Severity.ERROR, "boom", hint="try again")
    changed = original.replace(message="bang")
    assert changed.message == "bang"
    assert changed.hint == "try again"
    assert original.message == "boom"
