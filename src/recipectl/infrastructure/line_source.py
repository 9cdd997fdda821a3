"""Scoped line source over an output file.

Lines are yielded in file order with their terminator (``\\n``,
``\\r\\n`` or ``\\r``) removed, like a standard line reader. The file is
closed when the ``with`` block exits, whichever way it exits.
"""

from __future__ import annotations

from collections.abc import Generator, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO


def _lines(handle: TextIO) -> Iterator[str]:
    for line in handle:
        yield line[:-1] if line.endswith("\n") else line


@contextmanager
def open_line_source(path: Path, *, encoding: str = "utf-8") -> Generator[Iterator[str]]:
    """Open *path* and yield a lazy iterator over its lines."""
    with path.open(encoding=encoding, newline=None) as handle:
        yield _lines(handle)
