from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages,
argument types, and defaults. Provides logic to translate raw argparse
namespaces into logger settings.
"""

import argparse
from typing import Any, Dict, List, Optional

from rotalog.domain.config import DEFAULT_BACKUP_COUNT, DEFAULT_MAX_BYTES
from rotalog.domain.errors import ValidationError
from rotalog.domain.levels import LogLevel, lookup_level

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the rotalog CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="rotalog",
        description="Append a message to the rotating application log file.",
    )

    p.add_argument(
        "message",
        nargs="+",
        help="Message text. Multiple words are joined with spaces.",
    )

    # --- Entry Severity ---
    p.add_argument(
        "-l", "--level",
        dest="level",
        default=None,
        help="DEBUG, INFO, WARNING or ERROR (case-insensitive). Default: INFO.",
    )

    # --- Destination and Rotation ---
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Log file path. Overrides LOG_FILE for this invocation.",
    )
    p.add_argument(
        "--max-bytes",
        dest="max_bytes",
        type=int,
        default=DEFAULT_MAX_BYTES,
        help="Rotate the active file once it reaches this size.",
    )
    p.add_argument(
        "--backup-count",
        dest="backup_count",
        type=int,
        default=DEFAULT_BACKUP_COUNT,
        help="Number of rotated files to keep.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_settings(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into logger settings.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: message, level, log_file, max_bytes, backup_count.

    Raises:
        ValidationError: If the level name or a rotation limit is invalid.
    """
    if args.max_bytes <= 0:
        raise ValidationError(f"--max-bytes must be positive, got {args.max_bytes}")
    if args.backup_count < 0:
        raise ValidationError(f"--backup-count must not be negative, got {args.backup_count}")

    return {
        "message": _join_words(args.message),
        "level": _parse_cli_level(args.level),
        "log_file": args.log_file,
        "max_bytes": args.max_bytes,
        "backup_count": args.backup_count,
    }

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _join_words(words: List[str]) -> str:
    return " ".join(words)


def _parse_cli_level(value: Optional[str]) -> LogLevel:
    """Unlike LOG_LEVEL, an explicit CLI level must be a known name."""
    if value is None:
        return LogLevel.INFO
    level = lookup_level(value)
    if level is None:
        raise ValidationError(f"Unknown log level: {value}")
    return level
