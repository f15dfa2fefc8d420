from __future__ import annotations

"""
Diagnostics Core Orchestrator.

Maintains the idempotent lifecycle of the out-of-band diagnostics channel.
Failures of the file logger (unwritable directory, OS errors during rotation
or append) are reported here, on stderr, so that a broken log path never
breaks its own error reporting.
"""

import logging
from typing import Optional

from rotalog.infra.logging.config import _LEVEL_MAP, DIAGNOSTICS_LOGGER_NAME, DiagnosticsConfig
from rotalog.infra.logging.handlers import _create_stderr_handler, _is_our_handler

# Internal state flag for idempotency
_CONFIGURED_FLAG_ATTR: str = "_rotalog_configured"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_diagnostics(
        cfg: Optional[DiagnosticsConfig] = None,
        *,
        force: bool = False,
) -> logging.Logger:
    """
    Execute idempotent configuration of the diagnostics logger.

    Checks internal flags to avoid redundant handler attachments unless
    explicit re-configuration is requested. The logger does not propagate,
    so the host application's root handlers (which may include a file
    handler) never receive these records.

    Args:
        cfg: Structural configuration for the channel.
        force: If True, bypass idempotency checks and re-initialize handlers.

    Returns:
        logging.Logger: The diagnostics logger instance.
    """
    cfg = cfg or DiagnosticsConfig()
    diag = logging.getLogger(DIAGNOSTICS_LOGGER_NAME)

    already_configured = bool(getattr(diag, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return diag

    level_int = _parse_level(cfg.level)
    diag.setLevel(level_int)
    diag.propagate = False

    _remove_our_handlers(diag)

    sh = _create_stderr_handler(level_int, logging.Formatter(cfg.fmt, datefmt=cfg.datefmt))
    if sh:
        diag.addHandler(sh)

    setattr(diag, _CONFIGURED_FLAG_ATTR, True)
    return diag


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


def report(message: str, *args: object) -> None:
    """
    Emit a warning on the diagnostics channel. Never raises.

    Args:
        message: %-style format string.
        *args: Format arguments.
    """
    try:
        configure_diagnostics().warning(message, *args)
    except Exception:
        pass


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(diag: logging.Logger) -> None:
    """Identify and detach all internally-managed handlers."""
    for h in list(diag.handlers):
        if _is_our_handler(h):
            diag.removeHandler(h)
            try:
                h.close()
            except Exception:
                pass
