"""Shared test doubles and fixtures for unit tests."""

from __future__ import annotations

import io
from collections.abc import Callable

import pytest

from leveldbutil.application.ports import Environment, OutputSink
from leveldbutil.application.results import DumpStatus


class FakeEnvironment:
    """In-memory environment keyed by path."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self.files = dict(files or {})

    def file_exists(self, path: str) -> bool:
        return path in self.files

    def file_size(self, path: str) -> int:
        return len(self.files[path])

    def open_readable(self, path: str) -> io.BytesIO:
        return io.BytesIO(self.files[path])


class RecordingDecoder:
    """Decoder double that records calls and fails for selected paths."""

    name = "recording"

    def __init__(
        self,
        failing: set[str] | None = None,
        raising: dict[str, Exception] | None = None,
    ) -> None:
        self.failing = failing or set()
        self.raising = raising or {}
        self.calls: list[tuple[Environment, str]] = []

    def decode(self, env: Environment, input_path: str, sink: OutputSink) -> DumpStatus:
        self.calls.append((env, input_path))
        sink.append(f"decoded {input_path}\n".encode())
        if input_path in self.raising:
            raise self.raising[input_path]
        if input_path in self.failing:
            return DumpStatus.corruption(f"{input_path}: bad block")
        return DumpStatus.success()


@pytest.fixture
def fake_env() -> FakeEnvironment:
    """Empty in-memory environment."""
    return FakeEnvironment()


@pytest.fixture
def make_decoder() -> Callable[..., RecordingDecoder]:
    """Factory for recording decoder doubles."""
    return RecordingDecoder
