"""Command-line dispatch: mode selection and exit status."""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO

from pydantic import ValidationError

from leveldbutil.application.ports import Decoder, Environment
from leveldbutil.application.results import DumpReport
from leveldbutil.application.use_cases import (
    handle_dump_command,
    handle_dump_file_command,
)
from leveldbutil.errors import UsageError
from leveldbutil.schemas import DumpCommandConfig
from leveldbutil.types import ArgumentList, ErrorReporter

logger = logging.getLogger(__name__)

DUMP_TOKEN = "--dump"
PATH_TOKEN = "--path"

USAGE = (
    "Usage: leveldbutil command...\n"
    "   --dump files...                    -- dump contents of specified files\n"
    "   --dump files... --path filepath    -- dump contents to target path\n"
    "\n"
    "eg. leveldbutil --dump /data/app.leveldb/000003.log --path /tmp/output/\n"
)


def parse_command_line(args: ArgumentList) -> DumpCommandConfig:
    """Interpret ``args`` (program name excluded) as a dump command.

    Raises
    ------
    UsageError
        If the arguments do not start with ``--dump``, or a trailing
        ``--path`` pair is not preceded by any input file.
    """
    if not args:
        raise UsageError("no command given.")
    if args[0] != DUMP_TOKEN:
        raise UsageError(f"unknown command '{args[0]}'.")

    try:
        if len(args) >= 2 and args[-2] == PATH_TOKEN:
            return DumpCommandConfig(
                mode="directory",
                files=tuple(args[1:-2]),
                target_dir=args[-1],
            )
        return DumpCommandConfig(mode="console", files=tuple(args[1:]))
    except ValidationError as exc:
        raise UsageError(f"Invalid dump command: {exc}") from exc


def run_command(
    command: DumpCommandConfig,
    *,
    env: Environment,
    decoder: Decoder,
    console: BinaryIO | None = None,
    on_error: ErrorReporter | None = None,
) -> DumpReport:
    """Route a parsed command to its handler."""
    if command.mode == "directory" and command.target_dir is not None:
        return handle_dump_file_command(
            env,
            command.files,
            target_dir=command.target_dir,
            decoder=decoder,
            on_error=on_error,
        )
    return handle_dump_command(
        env,
        command.files,
        decoder=decoder,
        console=console,
        on_error=on_error,
    )


def dispatch(
    args: ArgumentList,
    *,
    env: Environment,
    decoder: Decoder,
    console: BinaryIO | None = None,
    on_error: ErrorReporter | None = None,
) -> int:
    """Parse ``args``, run the selected handler and return the exit code.

    Usage problems print :data:`USAGE` through ``on_error`` (stderr by
    default) and yield ``1``. Otherwise the exit code is ``0`` iff every
    input file was dumped successfully.
    """
    try:
        command = parse_command_line(args)
    except UsageError as exc:
        logger.debug("usage error: %s", exc)
        if on_error is not None:
            on_error(USAGE.rstrip("\n"))
        else:
            sys.stderr.write(USAGE)
        return exc.exit_code

    report = run_command(
        command,
        env=env,
        decoder=decoder,
        console=console,
        on_error=on_error,
    )
    logger.debug(
        "%s dump finished: %d file(s), %d failure(s)",
        report.mode,
        len(report.outcomes),
        len(report.failures),
    )
    return report.exit_code
