"""Output path derivation and storage file naming helpers."""

from __future__ import annotations

import re

from leveldbutil.types import StorageFileKind

OUTPUT_SUFFIX = "_output.txt"

_NUMBERED_FILE = re.compile(r"^(?P<number>\d+)\.(?P<ext>log|ldb|sst|dbtmp)$")
_DESCRIPTOR_FILE = re.compile(r"^MANIFEST-\d+$")
_EXTENSION_KINDS: dict[str, StorageFileKind] = {
    "log": "log",
    "ldb": "table",
    "sst": "table",
    "dbtmp": "temp",
}


def bare_filename(path: str) -> str:
    """Return the part of ``path`` after its last ``/`` or ``\\``.

    Parameters
    ----------
    path : str
        Input path, possibly qualified with POSIX or Windows separators.

    Returns
    -------
    str
        Bare file name, or ``path`` unchanged when it has no separator.
    """
    cut = max(path.rfind("/"), path.rfind("\\"))
    if cut < 0:
        return path
    return path[cut + 1 :]


def console_output_path(input_path: str) -> str:
    """Return the mirror file name used in console-dump mode."""
    return f"{input_path}{OUTPUT_SUFFIX}"


def directory_output_path(target_dir: str, input_path: str) -> str:
    """Return the redirect file name used in file-redirect mode.

    The directory is concatenated as given, so callers must supply the
    trailing separator themselves (``out/`` rather than ``out``).
    """
    return f"{target_dir}{bare_filename(input_path)}{OUTPUT_SUFFIX}"


def classify_storage_file(path: str) -> StorageFileKind:
    """Guess which kind of LevelDB file ``path`` names.

    Only the bare file name is inspected; file contents are never read.
    """
    name = bare_filename(path)
    if name == "CURRENT":
        return "current"
    if name == "LOCK":
        return "lock"
    if name in {"LOG", "LOG.old"}:
        return "info_log"
    if _DESCRIPTOR_FILE.match(name):
        return "descriptor"
    match = _NUMBERED_FILE.match(name)
    if match:
        return _EXTENSION_KINDS[match.group("ext")]
    return "unknown"
