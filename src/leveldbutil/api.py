"""Public dump API (delegates to application use-cases)."""

from __future__ import annotations

from typing import BinaryIO
from typing import Iterable
from typing import Optional

from leveldbutil.application.ports import Decoder, Environment
from leveldbutil.application.results import DumpReport
from leveldbutil.application.use_cases import handle_dump_command
from leveldbutil.application.use_cases import handle_dump_file_command
from leveldbutil.infrastructure.environment import default_environment
from leveldbutil.plugins.registry import create_default_registry
from leveldbutil.types import ErrorReporter


def _resolve_decoder(
    decoder: Optional[Decoder],
    decoder_name: Optional[str],
    decoder_modules: Optional[Iterable[str]],
) -> Decoder:
    if decoder is not None:
        return decoder
    registry = create_default_registry(extra_modules=decoder_modules)
    return registry.resolve(decoder_name)


def dump_to_console(
    files: Iterable[str],
    *,
    decoder: Optional[Decoder] = None,
    decoder_name: Optional[str] = None,
    decoder_modules: Optional[Iterable[str]] = None,
    env: Optional[Environment] = None,
    console: Optional[BinaryIO] = None,
    on_error: Optional[ErrorReporter] = None,
) -> DumpReport:
    """Dump ``files`` to the console, mirroring each to ``<file>_output.txt``."""
    return handle_dump_command(
        env or default_environment(),
        list(files),
        decoder=_resolve_decoder(decoder, decoder_name, decoder_modules),
        console=console,
        on_error=on_error,
    )


def dump_to_directory(
    files: Iterable[str],
    target_dir: str,
    *,
    decoder: Optional[Decoder] = None,
    decoder_name: Optional[str] = None,
    decoder_modules: Optional[Iterable[str]] = None,
    env: Optional[Environment] = None,
    on_error: Optional[ErrorReporter] = None,
) -> DumpReport:
    """Dump ``files`` into ``target_dir`` as ``<name>_output.txt`` files."""
    return handle_dump_file_command(
        env or default_environment(),
        list(files),
        target_dir=target_dir,
        decoder=_resolve_decoder(decoder, decoder_name, decoder_modules),
        on_error=on_error,
    )
