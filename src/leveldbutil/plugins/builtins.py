"""Built-in decoder plugins."""

from __future__ import annotations

from collections.abc import Callable

from leveldbutil.application.ports import Environment, OutputSink
from leveldbutil.application.results import DumpStatus
from leveldbutil.paths import bare_filename, classify_storage_file

_READ_CHUNK = 1 << 16


def _printable(byte: int) -> str:
    return chr(byte) if 32 <= byte < 127 else "."


class HexDumpDecoder:
    """Render any storage file as an offset / hex / ASCII listing.

    The file layout is not interpreted; the listing is a byte-level view
    preceded by a header naming the file and the kind suggested by its name.

    Parameters
    ----------
    width : int, default=16
        Bytes shown per line.
    """

    name = "hexdump"

    def __init__(self, width: int = 16) -> None:
        if width <= 0:
            raise ValueError("width must be a positive integer.")
        self.width = width

    def format_line(self, offset: int, chunk: bytes) -> str:
        """Format one listing line for ``chunk`` starting at ``offset``."""
        hex_part = " ".join(f"{byte:02x}" for byte in chunk)
        ascii_part = "".join(_printable(byte) for byte in chunk)
        return f"{offset:08x}  {hex_part:<{self.width * 3 - 1}}  |{ascii_part}|\n"

    def decode(self, env: Environment, input_path: str, sink: OutputSink) -> DumpStatus:
        """Write the hex listing of ``input_path`` through ``sink``.

        Returns
        -------
        DumpStatus
            ``NotFound`` when the file is missing, ``IO error`` when it cannot
            be read, otherwise success.
        """
        if not env.file_exists(input_path):
            return DumpStatus.not_found(f"{input_path}: No such file or directory")

        kind = classify_storage_file(input_path)
        try:
            size = env.file_size(input_path)
            header = f"--- {bare_filename(input_path)} ({kind}, {size} bytes)\n"
            sink.append(header.encode())
            with env.open_readable(input_path) as handle:
                self._dump_stream(handle.read, sink)
        except OSError as exc:
            return DumpStatus.io_error(f"{input_path}: {exc.strerror or exc}")
        return DumpStatus.success()

    def _dump_stream(self, read: Callable[[int], bytes], sink: OutputSink) -> None:
        offset = 0
        pending = b""
        while True:
            block = read(_READ_CHUNK)
            if not block:
                break
            pending += block
            whole = len(pending) - len(pending) % self.width
            if whole:
                sink.append(self._format_block(offset, pending[:whole]))
                offset += whole
                pending = pending[whole:]
        if pending:
            sink.append(self._format_block(offset, pending))

    def _format_block(self, offset: int, data: bytes) -> bytes:
        lines = [
            self.format_line(offset + start, data[start : start + self.width])
            for start in range(0, len(data), self.width)
        ]
        return "".join(lines).encode("ascii")
