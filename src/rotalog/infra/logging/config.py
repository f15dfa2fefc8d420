from __future__ import annotations

"""
Diagnostics Configuration Models.

Defines the data structures and constants for the out-of-band diagnostics
channel. This channel reports failures of the file logger itself and never
writes to the log file it is reporting about.
"""

import logging
from dataclasses import dataclass
from typing import Dict

DIAGNOSTICS_LOGGER_NAME = "rotalog.diagnostics"

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class DiagnosticsConfig:
    """
    Immutable settings for the diagnostics channel.

    Attributes:
        level: Minimum severity reported on stderr.
        fmt: Structural format for diagnostic lines.
        datefmt: Chronological format for timestamp generation.
    """
    level: str = "WARNING"
    fmt: str = "%(asctime)s | rotalog | %(levelname)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
