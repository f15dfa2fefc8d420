from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides directory creation and validation utilities for the log file
location. Acts as an abstraction over the 'os' module so that the logger
core never deals with raw OS error handling for these checks.
"""

import os
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

# rwxrwxr-x, further reduced by the process umask
DEFAULT_DIR_MODE = 0o775

# -----------------------------------------------------------------------------
# DIRECTORY API
# -----------------------------------------------------------------------------

def log_dir_of(path: str) -> str:
    """
    Resolve the absolute directory that holds a log file.

    Args:
        path: Log file path, absolute or relative.

    Returns:
        str: Absolute parent directory.
    """
    return os.path.dirname(os.path.abspath(path))


def safe_mkdir(path: str, mode: int = DEFAULT_DIR_MODE) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    An already existing directory counts as success, which also covers a
    concurrent process creating it first.

    Args:
        path: Target directory path.
        mode: Permission bits for newly created directories.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, mode=mode, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)


def ensure_parent_dir(path: str, mode: int = DEFAULT_DIR_MODE) -> Tuple[bool, Optional[str]]:
    """Create the parent directory hierarchy of a file if it is missing."""
    parent = log_dir_of(path)
    if os.path.isdir(parent):
        return True, None
    return safe_mkdir(parent, mode)


def is_writable_dir(path: str) -> bool:
    """
    Check that a directory exists and the current process may create files in it.

    Args:
        path: Directory to inspect.

    Returns:
        bool: True if the directory is usable for writing.
    """
    return os.path.isdir(path) and os.access(path, os.W_OK | os.X_OK)
