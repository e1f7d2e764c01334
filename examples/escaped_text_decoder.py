#!/usr/bin/env python3
"""Example decoder plugin that prints files as escaped text lines.

Load it with:

    leveldbutil --decoder-module examples/escaped_text_decoder.py \
        --decoder escaped-text --dump path/to/000003.log
"""

from __future__ import annotations

from leveldbutil.application.ports import Environment, OutputSink
from leveldbutil.application.results import DumpStatus


def _escape(line: bytes) -> str:
    return "".join(
        chr(byte) if 32 <= byte < 127 and byte != 0x5C else f"\\x{byte:02x}"
        for byte in line
    )


class EscapedTextDecoder:
    """Split a file on newlines and escape every non-printable byte."""

    name = "escaped-text"

    def decode(self, env: Environment, input_path: str, sink: OutputSink) -> DumpStatus:
        """Write one escaped line per input line.

        Parameters
        ----------
        env : Environment
            File-system access handle.
        input_path : str
            File to render.
        sink : OutputSink
            Destination for the rendered text.

        Returns
        -------
        DumpStatus
            ``NotFound`` for a missing file, otherwise success.
        """
        if not env.file_exists(input_path):
            return DumpStatus.not_found(f"{input_path}: No such file or directory")
        with env.open_readable(input_path) as handle:
            for number, line in enumerate(handle.read().split(b"\n"), start=1):
                sink.append(f"{number:6d}  {_escape(line)}\n".encode("ascii"))
        return DumpStatus.success()


DECODER = EscapedTextDecoder()
