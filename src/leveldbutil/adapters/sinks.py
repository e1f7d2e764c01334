"""Output sink adapters: file-only and console-mirrored destinations."""

from __future__ import annotations

import sys
from types import TracebackType
from typing import BinaryIO, Self

from leveldbutil.application.results import DumpStatus
from leveldbutil.errors import SinkOpenError


class _OwnedFileSink:
    """Own one binary file handle from construction until release."""

    def __init__(self, path: str) -> None:
        self.path = path
        try:
            self._file: BinaryIO | None = open(path, "wb")
        except OSError as exc:
            raise SinkOpenError(path, exc) from exc

    @property
    def released(self) -> bool:
        return self._file is None

    def _handle(self) -> BinaryIO:
        if self._file is None:
            raise ValueError(f"append on released sink for {self.path}")
        return self._file

    def close(self) -> DumpStatus:
        return DumpStatus.success()

    def flush(self) -> DumpStatus:
        return DumpStatus.success()

    def sync(self) -> DumpStatus:
        return DumpStatus.success()

    def release(self) -> None:
        """Close the owned handle; later calls are no-ops."""
        if self._file is None:
            return
        handle, self._file = self._file, None
        handle.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()


class FileSink(_OwnedFileSink):
    """Write appended bytes to a single file, truncating it on open."""

    def append(self, data: bytes) -> DumpStatus:
        self._handle().write(data)
        return DumpStatus.success()


class ConsoleMirroredSink(_OwnedFileSink):
    """Write appended bytes to the console and then to a mirror file.

    Parameters
    ----------
    path : str
        Mirror file to create (or truncate).
    console : BinaryIO | None, default=None
        Console byte stream. Defaults to ``sys.stdout.buffer`` looked up at
        construction time. The console stream is borrowed, never closed.
    """

    def __init__(self, path: str, console: BinaryIO | None = None) -> None:
        super().__init__(path)
        self._console = console if console is not None else sys.stdout.buffer

    def append(self, data: bytes) -> DumpStatus:
        handle = self._handle()
        self._console.write(data)
        self._console.flush()
        handle.write(data)
        return DumpStatus.success()
