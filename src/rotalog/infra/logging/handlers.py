from __future__ import annotations

"""
Diagnostics Handlers and Low-Level Utilities.

Provides the stderr handler factory and the tagging mechanism that lets the
diagnostics channel distinguish its own handler from handlers installed by
the host application.
"""

import logging
import sys
from typing import Optional

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_rotalog_handler"

# ==============================================================================
# INTERNAL LOGGING UTILITIES
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    """
    Mark a handler as an internally-managed diagnostics handler.

    Args:
        handler: The logging handler instance to tag.
    """
    try:
        setattr(handler, _HANDLER_TAG_ATTR, True)
    except Exception:
        pass


def _is_our_handler(handler: logging.Handler) -> bool:
    """
    Verify if a handler was initialized by this diagnostics module.

    Args:
        handler: The handler to inspect.

    Returns:
        bool: True if the handler carries our internal tag.
    """
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_stderr_handler(
        level_int: int,
        formatter: logging.Formatter,
) -> Optional[logging.StreamHandler]:
    """
    Initialize a stderr StreamHandler with robust error handling.

    The stream is looked up at emit time through sys.stderr so that
    redirections (including test capture) are honored.

    Args:
        level_int: Numeric logging level.
        formatter: Pre-configured logging formatter.

    Returns:
        Optional[StreamHandler]: Configured handler or None on failure.
    """
    try:
        sh = _StderrHandler()
        sh.setLevel(level_int)
        sh.setFormatter(formatter)
        _tag_handler(sh)
        return sh
    except Exception as e:
        sys.stderr.write(f"WARNING: Diagnostics channel initialization failure: {e}\n")
        return None


class _StderrHandler(logging.StreamHandler):
    """StreamHandler bound to whatever sys.stderr currently is."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass
