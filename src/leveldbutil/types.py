"""Shared type aliases for leveldbutil modules."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Literal, TypeAlias

DumpMode: TypeAlias = Literal["console", "directory"]
StatusCode: TypeAlias = Literal[
    "OK",
    "NotFound",
    "Corruption",
    "NotSupported",
    "InvalidArgument",
    "IOError",
]
StorageFileKind: TypeAlias = Literal[
    "log",
    "table",
    "descriptor",
    "current",
    "lock",
    "info_log",
    "temp",
    "unknown",
]
ArgumentList: TypeAlias = Sequence[str]
ErrorReporter: TypeAlias = Callable[[str], None]
