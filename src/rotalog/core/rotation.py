from __future__ import annotations

"""
Log File Rotation.

Renames an oversized active log file to a timestamped sibling and prunes the
oldest rotated siblings beyond the retention count. Every step tolerates
concurrent rotations and deletions by other processes sharing the file.
"""

import os
from datetime import datetime, timezone
from typing import Callable, List, Optional

from rotalog.infra.logging import get_logger

logger = get_logger(__name__)

ROTATION_SUFFIX_FORMAT = "%Y%m%d_%H%M%S"

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def rotated_name(path: str, when: datetime) -> str:
    """Build the rotated file name `<path>.<YYYYmmdd_HHMMSS>` (UTC)."""
    return f"{path}.{when.astimezone(timezone.utc).strftime(ROTATION_SUFFIX_FORMAT)}"


def needs_rotation(path: str, size_limit: int) -> bool:
    """
    Check whether the active file has reached the size limit.

    Args:
        path: Active log file.
        size_limit: Size in bytes that triggers a rotation.

    Returns:
        bool: False if the file is missing or strictly below the limit.
    """
    try:
        return os.path.getsize(path) >= size_limit
    except FileNotFoundError:
        return False


def list_rotated(path: str) -> List[str]:
    """
    List the rotated siblings of a log file, most recently modified first.

    Siblings are files in the same directory whose name starts with the
    active file name followed by a dot.

    Args:
        path: Active log file.

    Returns:
        List[str]: Absolute sibling paths sorted by mtime, descending.
    """
    directory = os.path.dirname(os.path.abspath(path))
    prefix = os.path.basename(path) + "."

    try:
        names = os.listdir(directory)
    except FileNotFoundError:
        return []

    stamped = []
    for name in names:
        if not name.startswith(prefix):
            continue
        full = os.path.join(directory, name)
        try:
            stamped.append((os.path.getmtime(full), full))
        except OSError:
            # Deleted by a concurrent pruner
            continue

    stamped.sort(key=lambda item: item[0], reverse=True)
    return [full for _, full in stamped]


def prune_rotated(path: str, retain_count: int) -> List[str]:
    """
    Delete rotated siblings beyond the `retain_count` most recent ones.

    Deletion is best-effort: a file that cannot be removed (or was already
    removed by another process) is skipped.

    Args:
        path: Active log file.
        retain_count: Number of rotated files to keep.

    Returns:
        List[str]: Paths that were actually deleted.
    """
    deleted: List[str] = []
    for stale in list_rotated(path)[max(int(retain_count), 0):]:
        try:
            os.remove(stale)
            deleted.append(stale)
        except OSError as e:
            logger.debug("Skipping rotated file cleanup for %s: %s", stale, e)
    return deleted


def maybe_rotate(
        path: str,
        size_limit: int,
        retain_count: int,
        clock: Optional[Clock] = None,
) -> Optional[str]:
    """
    Rotate the active log file if it has reached the size limit.

    The active file is renamed to `<path>.<UTC timestamp>`. A rotation in
    the same second as a previous one replaces that earlier rotated file.
    If another process renamed the file first, the rotation is treated as
    already done and pruning still runs.

    Args:
        path: Active log file.
        size_limit: Size in bytes that triggers a rotation.
        retain_count: Number of rotated files to keep.
        clock: Source of the rotation timestamp (UTC now by default).

    Returns:
        Optional[str]: The rotated file path, or None if nothing was renamed.
    """
    if not needs_rotation(path, size_limit):
        return None

    target = rotated_name(path, (clock or _utcnow)())
    rotated: Optional[str] = target
    try:
        os.replace(path, target)
    except FileNotFoundError:
        rotated = None

    prune_rotated(path, retain_count)
    return rotated
