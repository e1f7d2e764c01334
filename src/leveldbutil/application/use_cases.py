"""Application use-cases: the console-dump and file-redirect handlers."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from typing import BinaryIO, TypeAlias

from leveldbutil.adapters.sinks import ConsoleMirroredSink, FileSink
from leveldbutil.application.ports import Decoder, Environment, OutputSink
from leveldbutil.application.results import DumpReport, DumpStatus, FileOutcome
from leveldbutil.errors import DecodeError, SinkOpenError
from leveldbutil.paths import console_output_path, directory_output_path
from leveldbutil.types import DumpMode, ErrorReporter

logger = logging.getLogger(__name__)

_SinkFactory: TypeAlias = Callable[[str], ConsoleMirroredSink | FileSink]


def _report_to_stderr(message: str) -> None:
    print(message, file=sys.stderr, flush=True)


def _select(files: Sequence[str], count: int | None) -> Sequence[str]:
    if count is None:
        return files
    if count <= 0:
        return ()
    return files[:count]


def _dump_one(
    env: Environment,
    input_path: str,
    output_path: str,
    decoder: Decoder,
    open_sink: _SinkFactory,
) -> DumpStatus:
    """Open a sink for ``output_path`` and run the decoder through it."""
    try:
        with open_sink(output_path) as sink:
            return _decode(env, input_path, decoder, sink)
    except SinkOpenError as exc:
        return DumpStatus.io_error(str(exc))


def _decode(
    env: Environment,
    input_path: str,
    decoder: Decoder,
    sink: OutputSink,
) -> DumpStatus:
    try:
        return decoder.decode(env, input_path, sink)
    except DecodeError as exc:
        return DumpStatus.corruption(f"{input_path}: {exc}")
    except OSError as exc:
        return DumpStatus.io_error(f"{input_path}: {exc.strerror or exc}")
    except Exception as exc:
        logger.exception("decoder %s crashed on %s", decoder.name, input_path)
        return DumpStatus.corruption(f"{input_path}: {type(exc).__name__}: {exc}")


def _run(
    mode: DumpMode,
    env: Environment,
    files: Sequence[str],
    count: int | None,
    decoder: Decoder,
    output_path_for: Callable[[str], str],
    open_sink: _SinkFactory,
    on_error: ErrorReporter | None,
) -> DumpReport:
    report = on_error or _report_to_stderr
    outcomes: list[FileOutcome] = []
    for input_path in _select(files, count):
        output_path = output_path_for(input_path)
        logger.debug("dumping %s -> %s with %s", input_path, output_path, decoder.name)
        status = _dump_one(env, input_path, output_path, decoder, open_sink)
        if not status.ok:
            logger.info("failed to dump %s: %s", input_path, status)
            report(str(status))
        outcomes.append(FileOutcome(input_path, output_path, status))
    return DumpReport(mode=mode, outcomes=tuple(outcomes))


def handle_dump_command(
    env: Environment,
    files: Sequence[str],
    count: int | None = None,
    *,
    decoder: Decoder,
    console: BinaryIO | None = None,
    on_error: ErrorReporter | None = None,
) -> DumpReport:
    """Use-case: mirror each decoded file to the console and ``<file>_output.txt``.

    Parameters
    ----------
    env : Environment
        File-system access handle passed through to the decoder.
    files : Sequence[str]
        Input storage file paths, processed in order.
    count : int | None, default=None
        Upper bound on how many of ``files`` to process. ``None`` processes
        all of them; zero or a negative value processes none.
    decoder : Decoder
        Decoder that renders each file.
    console : BinaryIO | None, default=None
        Console byte stream; ``sys.stdout.buffer`` when omitted.
    on_error : ErrorReporter | None, default=None
        Receives the message of each failing status; prints to stderr when
        omitted.

    Returns
    -------
    DumpReport
        Per-file outcomes. A failing file never stops the remaining ones.
    """
    return _run(
        "console",
        env,
        files,
        count,
        decoder,
        console_output_path,
        lambda path: ConsoleMirroredSink(path, console=console),
        on_error,
    )


def handle_dump_file_command(
    env: Environment,
    files: Sequence[str],
    count: int | None = None,
    *,
    target_dir: str,
    decoder: Decoder,
    on_error: ErrorReporter | None = None,
) -> DumpReport:
    """Use-case: write each decoded file to ``<target_dir><name>_output.txt``.

    Same contract as :func:`handle_dump_command`, except that output goes
    only to a file named after the bare input file name inside
    ``target_dir``.
    """
    return _run(
        "directory",
        env,
        files,
        count,
        decoder,
        lambda input_path: directory_output_path(target_dir, input_path),
        FileSink,
        on_error,
    )
