from __future__ import annotations

"""
Logger Configuration Model.

Resolves the file logger settings from the process environment. Resolution
happens on every logging call, so changes to LOG_FILE or LOG_LEVEL apply to
the next entry without any reload step.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from rotalog.domain.levels import DEFAULT_LEVEL, LogLevel, parse_level

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

ENV_LOG_FILE = "LOG_FILE"
ENV_LOG_LEVEL = "LOG_LEVEL"

DEFAULT_MAX_BYTES = 25 * 1024 * 1024  # 25 MiB
DEFAULT_BACKUP_COUNT = 10

# <repo root>/logs/event.log in a source checkout
DEFAULT_LOG_FILE = os.path.normpath(
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "..", "..", "logs", "event.log")
)


@dataclass(frozen=True)
class LoggerConfig:
    """
    Immutable snapshot of the settings for a single logging call.

    Attributes:
        log_file: Path of the active log file.
        level: Minimum severity to write.
        max_bytes: Active file size that triggers a rotation.
        backup_count: Number of rotated files to keep.
    """
    log_file: str = DEFAULT_LOG_FILE
    level: LogLevel = DEFAULT_LEVEL
    max_bytes: int = DEFAULT_MAX_BYTES
    backup_count: int = DEFAULT_BACKUP_COUNT

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_log_file(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return LOG_FILE when set and non-empty, otherwise the default path."""
    env = os.environ if environ is None else environ
    return env.get(ENV_LOG_FILE) or DEFAULT_LOG_FILE


def resolve_level(environ: Optional[Mapping[str, str]] = None) -> LogLevel:
    """Return the threshold named by LOG_LEVEL, falling back to INFO."""
    env = os.environ if environ is None else environ
    return parse_level(env.get(ENV_LOG_LEVEL))


def resolve_config(
        environ: Optional[Mapping[str, str]] = None,
        *,
        max_bytes: int = DEFAULT_MAX_BYTES,
        backup_count: int = DEFAULT_BACKUP_COUNT,
) -> LoggerConfig:
    """
    Build the configuration snapshot from the environment.

    Never raises for bad input: missing or unrecognized values silently
    fall back to their defaults.

    Args:
        environ: Mapping to read from. Defaults to os.environ.
        max_bytes: Rotation size limit in bytes.
        backup_count: Number of rotated files to retain.

    Returns:
        LoggerConfig: Resolved settings.
    """
    return LoggerConfig(
        log_file=resolve_log_file(environ),
        level=resolve_level(environ),
        max_bytes=int(max_bytes),
        backup_count=int(backup_count),
    )
