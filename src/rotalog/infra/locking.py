from __future__ import annotations

"""
Advisory File Locking.

Exclusive whole-file locks used to serialize appends from several threads or
processes. POSIX systems use flock(); Windows uses msvcrt byte-range locking
on the first byte of the file.
"""

import errno
import os
from contextlib import contextmanager
from typing import IO, Any, Iterator

if os.name == "nt":
    import msvcrt
else:
    import fcntl


def _acquire(fh: IO[Any]) -> None:
    if os.name == "nt":
        fh.seek(0)
        # LK_LOCK gives up after ~10 one-second retries; keep waiting
        while True:
            try:
                msvcrt.locking(fh.fileno(), msvcrt.LK_LOCK, 1)
                return
            except OSError as e:
                if e.errno != errno.EDEADLOCK:
                    raise
    else:
        fcntl.flock(fh.fileno(), fcntl.LOCK_EX)


def _release(fh: IO[Any]) -> None:
    if os.name == "nt":
        fh.seek(0)
        msvcrt.locking(fh.fileno(), msvcrt.LK_UNLCK, 1)
    else:
        fcntl.flock(fh.fileno(), fcntl.LOCK_UN)


@contextmanager
def exclusive_lock(fh: IO[Any]) -> Iterator[IO[Any]]:
    """
    Hold an exclusive advisory lock on an open file for the duration of a block.

    Blocks until the lock is available. The lock is released on every exit
    path, including when the guarded block raises.

    Args:
        fh: Open file object.

    Yields:
        The same file object, locked.
    """
    _acquire(fh)
    try:
        yield fh
    finally:
        _release(fh)
