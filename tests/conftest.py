from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for an isolated log file location and environment.
"""

import os
import sys
from pathlib import Path
from typing import Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def log_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Point LOG_FILE at a fresh location and clear LOG_LEVEL.

    The parent directory is intentionally not created so that directory
    creation is exercised by default.

    Returns:
        Path: Path of the active log file.
    """
    path = tmp_path / "logs" / "event.log"
    monkeypatch.setenv("LOG_FILE", str(path))
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return path


@pytest.fixture(autouse=True)
def reset_default_logger() -> Iterator[None]:
    """Drop the module-level default logger between tests."""
    import rotalog.core.logger as logger_module

    logger_module._default_logger = None
    yield
    logger_module._default_logger = None
