from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates directory creation and writability checks for log locations.
"""

import os
from pathlib import Path
from unittest.mock import patch

from rotalog.infra.fs import ensure_parent_dir, is_writable_dir, log_dir_of, safe_mkdir


def test_log_dir_of_is_absolute() -> None:
    """TC-01: Verify relative log paths resolve against the working directory."""
    assert log_dir_of("logs/event.log") == os.path.join(os.getcwd(), "logs")


def test_safe_mkdir_success(tmp_path: Path) -> None:
    """TC-02: Verify recursive directory creation."""
    target = tmp_path / "deep" / "nested" / "dir"
    success, err = safe_mkdir(str(target))

    assert success is True
    assert err is None
    assert target.is_dir()


def test_safe_mkdir_existing_directory(tmp_path: Path) -> None:
    """TC-02: Verify a concurrently created directory counts as success."""
    assert safe_mkdir(str(tmp_path)) == (True, None)


def test_safe_mkdir_permission_error() -> None:
    """TC-03: Verify error handling when directory creation fails."""
    with patch("os.makedirs", side_effect=OSError("Permission Denied")):
        success, err = safe_mkdir("/root/forbidden")
        assert success is False
        assert "Permission Denied" in err


def test_ensure_parent_dir_skips_existing(tmp_path: Path) -> None:
    """TC-04: Verify no creation attempt is made for an existing parent."""
    with patch("rotalog.infra.fs.safe_mkdir") as mkdir:
        assert ensure_parent_dir(str(tmp_path / "event.log")) == (True, None)
    mkdir.assert_not_called()


def test_is_writable_dir(tmp_path: Path) -> None:
    """TC-05: Verify writability checks for directories, files and missing paths."""
    a_file = tmp_path / "file.txt"
    a_file.write_text("x", encoding="utf-8")

    assert is_writable_dir(str(tmp_path)) is True
    assert is_writable_dir(str(a_file)) is False
    assert is_writable_dir(str(tmp_path / "missing")) is False

    with patch("rotalog.infra.fs.os.access", return_value=False):
        assert is_writable_dir(str(tmp_path)) is False
