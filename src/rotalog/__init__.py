from __future__ import annotations

"""
rotalog: file-based logging with level filtering and size-triggered rotation.

Typical use::

    from rotalog import LogLevel, log

    log("Service started")
    log("Cache miss for key %s" % key, LogLevel.DEBUG)

The log file and threshold come from the LOG_FILE and LOG_LEVEL environment
variables, read on every call.
"""

from rotalog.core.logger import Logger, configure, get_default_logger, log
from rotalog.domain.config import LoggerConfig, resolve_config
from rotalog.domain.entry import CallerInfo, LogEntry
from rotalog.domain.errors import AppError, NotFoundError, ValidationError
from rotalog.domain.levels import LogLevel, level_name, parse_level, should_emit

__version__ = "1.0.0"

__all__ = [
    "AppError",
    "CallerInfo",
    "LogEntry",
    "LogLevel",
    "Logger",
    "LoggerConfig",
    "NotFoundError",
    "ValidationError",
    "configure",
    "get_default_logger",
    "level_name",
    "log",
    "parse_level",
    "resolve_config",
    "should_emit",
]
