#!/usr/bin/env python3
"""
leveldbutil.cli.cli

Typer-based CLI that dumps LevelDB storage files as readable text.

Everything that is not one of the options below is forwarded untouched to
the command dispatcher, so the classic ``--dump``/``--path`` syntax keeps its
positional meaning.

Examples
--------
Mirror two log segments to the terminal and to ``<file>_output.txt``:

    leveldbutil --dump db/000003.log db/000005.ldb

Write the dump of a table file into ``out/000005.ldb_output.txt`` only:

    leveldbutil --dump db/000005.ldb --path out/

Use a decoder shipped in a separate module:

    leveldbutil --decoder-module my_decoders.py --decoder leveldb --dump db/000003.log
"""

from __future__ import annotations

import logging
import sys
import traceback

import typer

from leveldbutil.application.dispatcher import dispatch
from leveldbutil.errors import LeveldbUtilError
from leveldbutil.infrastructure.environment import default_environment
from leveldbutil.plugins.registry import DEFAULT_DECODER, create_default_registry

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="leveldbutil",
    help="Dump LevelDB log and table files as human-readable text.",
    add_completion=False,
)

ARGS_HELP = "Command tokens: --dump files... [--path dir]"
DECODER_HELP = "Name of the decoder used to render each file."
DECODER_MODULE_HELP = "Python module or file path that registers decoders (repeatable)."
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _configure_logging(level_name: str) -> None:
    """Configure root logging on stderr.

    Raises
    ------
    typer.BadParameter
        If ``level_name`` is not a standard logging level.
    """
    level = logging.getLevelNamesMapping().get(level_name.upper())
    if level is None:
        raise typer.BadParameter(
            f"Unknown log level '{level_name}'.", param_hint="--log-level"
        )
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("leveldbutil").setLevel(level)


def _report_error(message: str) -> None:
    typer.echo(message, err=True)


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error and return the process exit code."""
    typer.echo(f"{type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


@app.command(
    context_settings={"ignore_unknown_options": True},
)
def main(
    args: list[str] | None = typer.Argument(None, metavar="COMMAND...", help=ARGS_HELP),
    decoder: str = typer.Option(
        DEFAULT_DECODER,
        "--decoder",
        envvar="LEVELDBUTIL_DECODER",
        help=DECODER_HELP,
    ),
    decoder_module: list[str] | None = typer.Option(
        None,
        "--decoder-module",
        envvar="LEVELDBUTIL_DECODER_MODULES",
        help=DECODER_MODULE_HELP,
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="LEVELDBUTIL_LOG_LEVEL",
        help="Logging level for diagnostics on stderr.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Dump LevelDB storage files to the terminal or to a target directory.

    Parameters
    ----------
    args : list[str] | None
        ``--dump files...`` or ``--dump files... --path dir``.
    decoder : str, default="hexdump"
        Registered decoder name.
    decoder_module : list[str] | None
        Extra decoder modules to load before resolving ``decoder``.
    log_level : str, default="WARNING"
        Root logging level.
    debug : bool, default=False
        Whether to print tracebacks for unexpected errors.

    Notes
    -----
    - Exit code is 0 when every file was dumped, 1 when any file failed or
      the command line was not understood.
    """
    _configure_logging(log_level)

    try:
        registry = create_default_registry(extra_modules=decoder_module)
        selected = registry.resolve(decoder)
        code = dispatch(
            args or [],
            env=default_environment(),
            decoder=selected,
            on_error=_report_error,
        )
    except LeveldbUtilError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        logger.debug("unexpected error while dumping files", exc_info=True)
        raise typer.Exit(code=_print_error(exc, debug))

    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()
