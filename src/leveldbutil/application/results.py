"""Application-layer status and result objects."""

from __future__ import annotations

from dataclasses import dataclass

from leveldbutil.types import DumpMode, StatusCode

_STATUS_LABELS: dict[StatusCode, str] = {
    "OK": "OK",
    "NotFound": "NotFound",
    "Corruption": "Corruption",
    "NotSupported": "Not implemented",
    "InvalidArgument": "Invalid argument",
    "IOError": "IO error",
}


@dataclass(frozen=True)
class DumpStatus:
    """Outcome reported by sinks and decoders.

    Parameters
    ----------
    code : StatusCode
        Machine-readable status category.
    message : str, default=""
        Human-readable detail; empty for successful statuses.
    """

    code: StatusCode = "OK"
    message: str = ""

    @property
    def ok(self) -> bool:
        """Return ``True`` for a successful status."""
        return self.code == "OK"

    @classmethod
    def success(cls) -> DumpStatus:
        return cls()

    @classmethod
    def not_found(cls, message: str) -> DumpStatus:
        return cls("NotFound", message)

    @classmethod
    def io_error(cls, message: str) -> DumpStatus:
        return cls("IOError", message)

    @classmethod
    def corruption(cls, message: str) -> DumpStatus:
        return cls("Corruption", message)

    @classmethod
    def invalid_argument(cls, message: str) -> DumpStatus:
        return cls("InvalidArgument", message)

    @classmethod
    def not_supported(cls, message: str) -> DumpStatus:
        return cls("NotSupported", message)

    def __str__(self) -> str:
        if self.ok:
            return "OK"
        return f"{_STATUS_LABELS[self.code]}: {self.message}"


@dataclass(frozen=True)
class FileOutcome:
    """Result of dumping a single input file."""

    input_path: str
    output_path: str
    status: DumpStatus

    @property
    def ok(self) -> bool:
        return self.status.ok


@dataclass(frozen=True)
class DumpReport:
    """Aggregate result of one handler run."""

    mode: DumpMode
    outcomes: tuple[FileOutcome, ...] = ()

    @property
    def ok(self) -> bool:
        """Return ``True`` when no file failed (vacuously for no files)."""
        return all(outcome.ok for outcome in self.outcomes)

    @property
    def failures(self) -> tuple[FileOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.ok)

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1
