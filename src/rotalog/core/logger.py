from __future__ import annotations

"""
File Logger Entry Point.

Composes configuration resolution, level filtering, caller attribution,
rotation and the locked append into one synchronous call. The call is total
from the caller's point of view: every failure is caught at the outer
boundary and reported on the diagnostics channel.
"""

import os
from datetime import datetime, timezone
from typing import Callable, Mapping, Optional

from rotalog.core.caller import CallerResolver, resolve_caller
from rotalog.core.rotation import maybe_rotate
from rotalog.core.writer import write_entry
from rotalog.domain.config import (
    DEFAULT_BACKUP_COUNT,
    DEFAULT_MAX_BYTES,
    LoggerConfig,
    resolve_config,
)
from rotalog.domain.entry import LogEntry
from rotalog.domain.levels import DEFAULT_LEVEL, LogLevel, should_emit
from rotalog.infra.logging import report

Clock = Callable[[], datetime]


class Logger:
    """
    File logger holding its own rotation limits and collaborators.

    Log file and threshold are read from the environment on every call.

    Args:
        environ: Mapping read for LOG_FILE and LOG_LEVEL (os.environ if None).
        max_bytes: Active file size that triggers a rotation.
        backup_count: Number of rotated files to keep.
        caller_resolver: Call site lookup, see rotalog.core.caller.
        clock: UTC time source for entries and rotation names.
    """

    def __init__(
            self,
            environ: Optional[Mapping[str, str]] = None,
            *,
            max_bytes: int = DEFAULT_MAX_BYTES,
            backup_count: int = DEFAULT_BACKUP_COUNT,
            caller_resolver: CallerResolver = resolve_caller,
            clock: Optional[Clock] = None,
    ) -> None:
        self.environ = environ
        self.max_bytes = int(max_bytes)
        self.backup_count = int(backup_count)
        self.caller_resolver = caller_resolver
        self.clock = clock or _utcnow

    def config(self) -> LoggerConfig:
        """Resolve the settings in effect right now."""
        return resolve_config(
            os.environ if self.environ is None else self.environ,
            max_bytes=self.max_bytes,
            backup_count=self.backup_count,
        )

    def log(self, message: str, level: Optional[int] = None, *, stacklevel: int = 1) -> None:
        """
        Write a message to the log file if its level passes the threshold.

        Never raises and never returns a value.

        Args:
            message: Text to log.
            level: Severity (LogLevel or int). Defaults to INFO.
            stacklevel: 1 attributes the entry to the caller of this method;
                wrappers add one per extra frame.
        """
        try:
            cfg = self.config()
            message_level = DEFAULT_LEVEL if level is None else level

            if not should_emit(message_level, cfg.level):
                return

            entry = LogEntry(
                message=message,
                level=int(message_level),
                caller=self.caller_resolver(stacklevel),
                timestamp=self.clock(),
            )

            write_entry(
                entry,
                cfg.log_file,
                before_append=lambda: maybe_rotate(
                    cfg.log_file, cfg.max_bytes, cfg.backup_count, clock=self.clock
                ),
            )
        except Exception as e:
            report("Logger exception: %s", e)

    def debug(self, message: str) -> None:
        self.log(message, LogLevel.DEBUG, stacklevel=2)

    def info(self, message: str) -> None:
        self.log(message, LogLevel.INFO, stacklevel=2)

    def warning(self, message: str) -> None:
        self.log(message, LogLevel.WARNING, stacklevel=2)

    def error(self, message: str) -> None:
        self.log(message, LogLevel.ERROR, stacklevel=2)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

# -----------------------------------------------------------------------------
# MODULE-LEVEL DEFAULT LOGGER
# -----------------------------------------------------------------------------

_default_logger: Optional[Logger] = None


def get_default_logger() -> Logger:
    """Return the process-wide logger used by `log`, creating it on first use."""
    global _default_logger
    if _default_logger is None:
        _default_logger = Logger()
    return _default_logger


def configure(
        *,
        max_bytes: Optional[int] = None,
        backup_count: Optional[int] = None,
) -> Logger:
    """
    Override the rotation limits of the default logger.

    Intended to be called once at startup (or by tests) before logging.
    Omitted values keep their defaults.

    Args:
        max_bytes: Rotation size limit in bytes.
        backup_count: Number of rotated files to keep.

    Returns:
        Logger: The new default logger.
    """
    global _default_logger
    _default_logger = Logger(
        max_bytes=DEFAULT_MAX_BYTES if max_bytes is None else max_bytes,
        backup_count=DEFAULT_BACKUP_COUNT if backup_count is None else backup_count,
    )
    return _default_logger


def log(message: str, level: Optional[int] = None) -> None:
    """
    Write a message through the default logger. Never raises.

    Args:
        message: Text to log.
        level: Severity (LogLevel or int). Defaults to INFO.
    """
    get_default_logger().log(message, level, stacklevel=2)
