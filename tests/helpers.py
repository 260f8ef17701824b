"""Helper utilities for tests."""

from pathlib import Path
from typing import List


def write_store(path: Path, lines: List[str]) -> None:
    """Write raw records to a store file, one per line.

    Args:
        path: Store file to create or overwrite.
        lines: Record lines without trailing newlines.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")


def read_store(path: Path) -> List[str]:
    """Read a store file back as a list of lines without newlines."""
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()
