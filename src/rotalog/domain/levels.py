from __future__ import annotations

"""
Severity Levels and Threshold Filtering.

Defines the ordered severity scale used by the file logger, the mapping to
display names, and the numeric comparison that decides whether a message is
emitted or dropped.
"""

from enum import IntEnum
from typing import Dict, Optional


class LogLevel(IntEnum):
    """Ordered severity scale. Higher value means higher severity."""
    DEBUG = 100
    INFO = 200
    WARNING = 300
    ERROR = 400


DEFAULT_LEVEL: LogLevel = LogLevel.INFO

_LEVEL_NAMES: Dict[int, str] = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARNING",
    LogLevel.ERROR: "ERROR",
}

_NAME_TO_LEVEL: Dict[str, LogLevel] = {name: LogLevel(lvl) for lvl, name in _LEVEL_NAMES.items()}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def level_name(level: int) -> str:
    """
    Resolve the display name of a severity level.

    Unknown numeric levels are displayed as INFO.

    Args:
        level: Numeric severity.

    Returns:
        str: Upper-case level name.
    """
    return _LEVEL_NAMES.get(int(level), "INFO")


def parse_level(value: Optional[str], default: LogLevel = DEFAULT_LEVEL) -> LogLevel:
    """
    Convert a level name into its LogLevel, case-insensitively.

    Args:
        value: Raw level name (e.g. from the environment).
        default: Level returned when the value is empty or unknown.

    Returns:
        LogLevel: The matching level, or the default.
    """
    if not value:
        return default
    return _NAME_TO_LEVEL.get(str(value).strip().upper(), default)


def lookup_level(value: str) -> Optional[LogLevel]:
    """Strict variant of parse_level: returns None for unknown names."""
    return _NAME_TO_LEVEL.get(str(value).strip().upper())


def should_emit(message_level: Optional[int], system_threshold: int) -> bool:
    """
    Decide whether a message passes the active threshold.

    A missing message level counts as INFO. The comparison is purely numeric,
    so levels outside the named constants work as well.

    Args:
        message_level: Severity of the message, or None.
        system_threshold: Minimum severity to emit.

    Returns:
        bool: True when the message must be written.
    """
    if message_level is None:
        message_level = DEFAULT_LEVEL
    return int(message_level) >= int(system_threshold)
