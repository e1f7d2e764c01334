"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from typing import BinaryIO, Protocol, runtime_checkable

from leveldbutil.application.results import DumpStatus


class OutputSink(Protocol):
    """Append-only destination for decoded text."""

    def append(self, data: bytes) -> DumpStatus:
        """Write the full byte range of ``data``."""

    def close(self) -> DumpStatus:
        """Signal close; the owned handle is released at end of scope."""

    def flush(self) -> DumpStatus:
        """Signal flush."""

    def sync(self) -> DumpStatus:
        """Signal sync."""


class Environment(Protocol):
    """File-system access handle shared by every decode call."""

    def file_exists(self, path: str) -> bool:
        """Return whether ``path`` names an existing file."""

    def file_size(self, path: str) -> int:
        """Return the size of ``path`` in bytes."""

    def open_readable(self, path: str) -> BinaryIO:
        """Open ``path`` for sequential binary reading."""


@runtime_checkable
class Decoder(Protocol):
    """Render a storage file as readable text through a sink."""

    name: str

    def decode(self, env: Environment, input_path: str, sink: OutputSink) -> DumpStatus:
        """Decode ``input_path`` and write its text via ``sink.append``.

        Returns
        -------
        DumpStatus
            Successful status, or a failing status carrying the reason.
        """
