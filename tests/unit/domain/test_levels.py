from __future__ import annotations

"""
Unit tests for severity levels and threshold filtering.

Verifies:
1. Numeric ordering of the level scale.
2. Display names, including the INFO fallback for unknown values.
3. Case-insensitive parsing with silent fallback.
4. The emit/drop decision.
"""

import pytest

from rotalog.domain.levels import LogLevel, level_name, lookup_level, parse_level, should_emit


def test_levels_are_ordered_numerically() -> None:
    assert LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARNING < LogLevel.ERROR
    assert [int(lvl) for lvl in LogLevel] == [100, 200, 300, 400]


@pytest.mark.parametrize(
    "message_level, threshold, expected",
    [
        (LogLevel.DEBUG, LogLevel.WARNING, False),
        (LogLevel.ERROR, LogLevel.WARNING, True),
        (LogLevel.WARNING, LogLevel.WARNING, True),
        (LogLevel.INFO, LogLevel.DEBUG, True),
        (250, LogLevel.INFO, True),
        (199, LogLevel.INFO, False),
    ],
)
def test_should_emit_is_a_numeric_comparison(message_level, threshold, expected) -> None:
    assert should_emit(message_level, threshold) is expected


def test_should_emit_treats_missing_level_as_info() -> None:
    assert should_emit(None, LogLevel.INFO) is True
    assert should_emit(None, LogLevel.WARNING) is False


def test_level_name_mapping() -> None:
    assert level_name(LogLevel.DEBUG) == "DEBUG"
    assert level_name(LogLevel.ERROR) == "ERROR"
    assert level_name(300) == "WARNING"


def test_level_name_unknown_value_displays_as_info() -> None:
    assert level_name(999) == "INFO"
    assert level_name(0) == "INFO"


@pytest.mark.parametrize("raw", ["debug", "DEBUG", " Debug ", "dEbUg"])
def test_parse_level_is_case_insensitive(raw: str) -> None:
    assert parse_level(raw) is LogLevel.DEBUG


@pytest.mark.parametrize("raw", [None, "", "verbose", "WARN", "CRITICAL", "10"])
def test_parse_level_falls_back_to_info(raw) -> None:
    assert parse_level(raw) is LogLevel.INFO


def test_lookup_level_is_strict() -> None:
    assert lookup_level("error") is LogLevel.ERROR
    assert lookup_level("nope") is None
