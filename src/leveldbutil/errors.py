"""Exception hierarchy for leveldbutil."""

from __future__ import annotations


class LeveldbUtilError(Exception):
    """Base error for all leveldbutil failures."""

    exit_code: int = 1


class UsageError(LeveldbUtilError):
    """Raised when the command line cannot be interpreted."""


class DecodeError(LeveldbUtilError):
    """Raised when a storage file could not be rendered."""


class SinkOpenError(DecodeError):
    """Raised when an output sink cannot open its destination."""

    def __init__(self, path: str, reason: OSError) -> None:
        self.path = path
        self.reason = reason
        detail = reason.strerror or str(reason)
        super().__init__(f"{path}: {detail}")


class DecoderPluginError(LeveldbUtilError):
    """Raised when decoder registration or lookup fails."""
