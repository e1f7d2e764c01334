"""Render LevelDB storage files as human-readable text."""

from __future__ import annotations

from collections.abc import Iterable
from typing import BinaryIO

from leveldbutil.application.ports import Decoder, Environment
from leveldbutil.application.results import DumpReport
from leveldbutil.types import ErrorReporter

__version__ = "0.1.0"


def dump_to_console(
    files: Iterable[str],
    *,
    decoder: Decoder | None = None,
    decoder_name: str | None = None,
    decoder_modules: Iterable[str] | None = None,
    env: Environment | None = None,
    console: BinaryIO | None = None,
    on_error: ErrorReporter | None = None,
) -> DumpReport:
    """Dump storage files to stdout and to ``<file>_output.txt`` mirrors.

    Parameters
    ----------
    files : Iterable[str]
        Storage file paths, processed in order.
    decoder : Decoder | None, default=None
        Decoder instance. When omitted, ``decoder_name`` is looked up in the
        default registry.
    decoder_name : str | None, default=None
        Registered decoder name; the built-in ``hexdump`` when omitted.
    decoder_modules : Iterable[str] | None, default=None
        Extra decoder modules (dotted names or ``.py`` paths) loaded into the
        registry before ``decoder_name`` is resolved.
    env : Environment | None, default=None
        File-system environment; the local default when omitted.
    console : BinaryIO | None, default=None
        Console byte stream; ``sys.stdout.buffer`` when omitted.
    on_error : ErrorReporter | None, default=None
        Receives each failure message; stderr when omitted.

    Returns
    -------
    DumpReport
        Per-file outcomes.
    """
    from .api import dump_to_console as _impl

    return _impl(
        files,
        decoder=decoder,
        decoder_name=decoder_name,
        decoder_modules=decoder_modules,
        env=env,
        console=console,
        on_error=on_error,
    )


def dump_to_directory(
    files: Iterable[str],
    target_dir: str,
    *,
    decoder: Decoder | None = None,
    decoder_name: str | None = None,
    decoder_modules: Iterable[str] | None = None,
    env: Environment | None = None,
    on_error: ErrorReporter | None = None,
) -> DumpReport:
    """Dump storage files into ``target_dir``.

    Parameters
    ----------
    files : Iterable[str]
        Storage file paths, processed in order.
    target_dir : str
        Output directory prefix, concatenated as given (keep the trailing
        separator).
    decoder, decoder_name, decoder_modules, env, on_error
        As for :func:`dump_to_console`.

    Returns
    -------
    DumpReport
        Per-file outcomes.
    """
    from .api import dump_to_directory as _impl

    return _impl(
        files,
        target_dir,
        decoder=decoder,
        decoder_name=decoder_name,
        decoder_modules=decoder_modules,
        env=env,
        on_error=on_error,
    )


__all__ = [
    "__version__",
    "dump_to_console",
    "dump_to_directory",
]
