from __future__ import annotations

"""
Log Entry Domain Model.

Defines the ephemeral record built for every emitted message and its
single-line text rendering.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone

from rotalog.domain.levels import level_name

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
GLOBAL_SCOPE = "global"
LINE_TERMINATOR = "\n"

# Every boundary recognized by str.splitlines()
_LINE_BREAK_RE = re.compile("\r\n|[\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029]")


@dataclass(frozen=True)
class CallerInfo:
    """
    Call site that produced a log entry.

    Attributes:
        file: Source file basename.
        line: Line number of the call.
        function: Enclosing function name, "global" at module level.
    """
    file: str = "unknown"
    line: int = 0
    function: str = GLOBAL_SCOPE


@dataclass(frozen=True)
class LogEntry:
    """
    A single log line before it is written.

    Attributes:
        message: Free-text message.
        level: Numeric severity.
        caller: Attributed call site.
        timestamp: UTC creation time.
    """
    message: str
    level: int
    caller: CallerInfo = field(default_factory=CallerInfo)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def format(self) -> str:
        """
        Render the entry as exactly one terminated line.

        Format: ``[<timestamp>] [<LEVEL>][<file>:<line>][<function>] <message>``
        """
        ts = self.timestamp.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)
        return "[{}] [{}][{}:{}][{}] {}{}".format(
            ts,
            level_name(self.level),
            self.caller.file,
            self.caller.line,
            self.caller.function,
            _single_line(self.message),
            LINE_TERMINATOR,
        )


def _single_line(message: str) -> str:
    """Escape embedded line breaks so one entry never spans several lines."""
    text = str(message)
    return _LINE_BREAK_RE.sub(r"\\n", text)
