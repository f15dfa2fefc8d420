from __future__ import annotations

"""
Unit tests for LogEntry formatting.
"""

from datetime import datetime, timedelta, timezone

from rotalog.domain.entry import CallerInfo, LogEntry
from rotalog.domain.levels import LogLevel

WHEN = datetime(2024, 3, 9, 14, 5, 7, 123456, tzinfo=timezone.utc)


def test_format_layout() -> None:
    entry = LogEntry(
        message="User created",
        level=LogLevel.WARNING,
        caller=CallerInfo(file="service.py", line=42, function="create_user"),
        timestamp=WHEN,
    )

    assert entry.format() == "[2024-03-09 14:05:07] [WARNING][service.py:42][create_user] User created\n"


def test_format_converts_timestamp_to_utc() -> None:
    local = WHEN.astimezone(timezone(timedelta(hours=2)))
    entry = LogEntry(message="x", level=LogLevel.INFO, timestamp=local)

    assert entry.format().startswith("[2024-03-09 14:05:07] ")


def test_unknown_level_is_displayed_as_info() -> None:
    entry = LogEntry(message="x", level=250, timestamp=WHEN)
    assert "[INFO]" in entry.format()


def test_default_caller_is_unknown_global() -> None:
    entry = LogEntry(message="x", level=LogLevel.INFO, timestamp=WHEN)
    assert "[unknown:0][global]" in entry.format()


def test_multiline_message_stays_on_one_line() -> None:
    entry = LogEntry(message="first\nsecond\r\nthird\rfourth", level=LogLevel.ERROR, timestamp=WHEN)
    text = entry.format()

    assert text.count("\n") == 1
    assert text.endswith("first\\nsecond\\nthird\\nfourth\n")


def test_unicode_line_separators_stay_on_one_line() -> None:
    message = "a\u2028b\x85c\x0bd\x0ce\u2029f\x1cg"
    text = LogEntry(message=message, level=LogLevel.INFO, timestamp=WHEN).format()

    assert len(text.splitlines()) == 1
    assert text.endswith("a\\nb\\nc\\nd\\ne\\nf\\ng\n")
