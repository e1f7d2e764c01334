"""Default file-system environment implementation."""

from __future__ import annotations

from functools import cache
from pathlib import Path
from typing import BinaryIO


class LocalEnvironment:
    """Environment backed by the local file system."""

    def file_exists(self, path: str) -> bool:
        return Path(path).is_file()

    def file_size(self, path: str) -> int:
        return Path(path).stat().st_size

    def open_readable(self, path: str) -> BinaryIO:
        """Open ``path`` for binary reading.

        Raises
        ------
        OSError
            If the file cannot be opened.
        """
        return Path(path).open("rb")


@cache
def default_environment() -> LocalEnvironment:
    """Return the process-wide default environment."""
    return LocalEnvironment()
