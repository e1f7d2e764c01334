#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    package = ROOT / "src/leveldbutil"
    layers = [
        *(package / "application").glob("*.py"),
        *(package / "adapters").glob("*.py"),
        *(package / "plugins").glob("*.py"),
        package / "paths.py",
    ]
    for path in layers:
        _assert_no_imports(
            path,
            [
                "import typer",
                "from typer",
                "leveldbutil.cli",
            ],
        )

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
