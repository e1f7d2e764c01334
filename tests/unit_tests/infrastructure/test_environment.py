"""Unit tests for the local file-system environment."""

from __future__ import annotations

from pathlib import Path

import pytest

from leveldbutil.infrastructure.environment import LocalEnvironment, default_environment


def test_default_environment_is_process_wide() -> None:
    """Repeated lookups return the same handle."""
    assert default_environment() is default_environment()
    assert isinstance(default_environment(), LocalEnvironment)


def test_local_environment_file_operations(tmp_path: Path) -> None:
    """Report existence, size and contents of regular files."""
    env = LocalEnvironment()
    path = tmp_path / "000003.log"
    path.write_bytes(b"\x01\x02\x03")

    assert env.file_exists(str(path))
    assert not env.file_exists(str(tmp_path / "missing.log"))
    assert not env.file_exists(str(tmp_path))
    assert env.file_size(str(path)) == 3
    with env.open_readable(str(path)) as handle:
        assert handle.read() == b"\x01\x02\x03"


def test_local_environment_open_missing_raises(tmp_path: Path) -> None:
    """Opening a missing file surfaces the OSError."""
    with pytest.raises(FileNotFoundError):
        LocalEnvironment().open_readable(str(tmp_path / "missing.log"))
