from __future__ import annotations

from .config import DiagnosticsConfig
from .core import (
    configure_diagnostics,
    get_logger,
    report,
)

__all__ = [
    "DiagnosticsConfig",
    "configure_diagnostics",
    "get_logger",
    "report",
]
