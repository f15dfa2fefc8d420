from __future__ import annotations

"""
Log Entry Writer.

Prepares the log directory and appends formatted entries to the active file
under an exclusive advisory lock, so that concurrent writers in other threads
or processes never interleave partial lines.
"""

from typing import Callable, Optional

from rotalog.domain.entry import LogEntry
from rotalog.infra.fs import ensure_parent_dir, is_writable_dir, log_dir_of
from rotalog.infra.locking import exclusive_lock
from rotalog.infra.logging import get_logger, report

logger = get_logger(__name__)

LOG_ENCODING = "utf-8"
# Lone surrogates (undecodable file names) are written as \udcXX escapes
LOG_ENCODING_ERRORS = "backslashreplace"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def prepare_log_dir(path: str) -> bool:
    """
    Ensure the directory of the log file exists and accepts new files.

    Missing directories are created with their intermediates. An unusable
    directory is reported on the diagnostics channel instead of raising.

    Args:
        path: Active log file.

    Returns:
        bool: True if the file can be written.
    """
    directory = log_dir_of(path)
    ok, err = ensure_parent_dir(path)
    if not ok:
        logger.debug("Log directory creation failed for %s: %s", directory, err)

    if not is_writable_dir(directory):
        report("Log directory is not writable: %s", directory)
        return False
    return True


def append_line(path: str, line: str) -> None:
    """
    Append one pre-formatted line while holding an exclusive lock.

    The data is flushed before the lock is released. OS errors propagate
    to the caller.

    Args:
        path: Active log file.
        line: Text including its line terminator.
    """
    with open(path, "a", encoding=LOG_ENCODING, errors=LOG_ENCODING_ERRORS, newline="") as fh:
        with exclusive_lock(fh):
            fh.write(line)
            fh.flush()


def write_entry(
        entry: LogEntry,
        path: str,
        *,
        before_append: Optional[Callable[[], object]] = None,
) -> bool:
    """
    Write a single entry to the log file.

    Steps: prepare the directory, run the optional pre-append hook (used
    for rotation, so the entry lands in the fresh file), then append the
    formatted line under lock.

    Args:
        entry: Entry to persist.
        path: Active log file.
        before_append: Callable executed right before the append.

    Returns:
        bool: False if the write was skipped because the directory is unusable.
    """
    if not prepare_log_dir(path):
        return False

    line = entry.format()
    if before_append is not None:
        before_append()

    append_line(path, line)
    return True
