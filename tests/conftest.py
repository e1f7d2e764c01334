"""Shared pytest configuration, suite markers and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

_SUITE_MARKERS = {
    "e2e_tests": "e2e",
    "integration_tests": "integration",
    "unit_tests": "unit",
}


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on the directory a test lives in."""
    del config
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        for directory, marker in _SUITE_MARKERS.items():
            if directory in parts:
                item.add_marker(getattr(pytest.mark, marker))
                break


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working directory.

    Console-mode dumps write ``<input>_output.txt`` relative to the current
    directory, so tests using bare input names need an isolated cwd.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path
