"""Application-layer ports, results and use-cases."""

from __future__ import annotations

from leveldbutil.application.ports import Decoder, Environment, OutputSink
from leveldbutil.application.results import DumpReport, DumpStatus, FileOutcome

__all__ = [
    "Decoder",
    "Environment",
    "OutputSink",
    "DumpStatus",
    "DumpReport",
    "FileOutcome",
]
