"""
Byte-level edits of existing files: overwrite at an offset, insert at an offset.

Both refuse offsets past the end of the file (no sparse gaps). Neither is atomic:
an interrupted call can leave the file partially written.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from filerw.errors import GapNotAllowedError
from filerw.paths import PathLike, validate_file_path

logger = logging.getLogger(__name__)


def _check_offset(path: PathLike, from_byte: int) -> int:
    """Return the current file size if `from_byte` is a valid write offset for it."""
    file_size = validate_file_path(path, file_should_exist=True)
    if from_byte < 0:
        raise ValueError(f"offset cannot be negative: {from_byte}")
    if from_byte > file_size:
        raise GapNotAllowedError(from_byte, file_size)
    return file_size


def _write_all(f: BinaryIO, data: bytes) -> None:
    """Unbuffered writes may be short; keep going until everything is out."""
    view = memoryview(data)
    while view:
        written = f.write(view)
        view = view[written:]


def overwrite_at(path: PathLike, from_byte: int, replacement: bytes) -> None:
    """
    Write `replacement` starting at `from_byte`, replacing the bytes already there.

    from_byte == file size appends. A replacement running past the old end grows
    the file; bytes after the written range are left alone.
    """
    file_size = _check_offset(path, from_byte)
    with open(path, "r+b", buffering=0) as f:
        f.seek(from_byte)
        _write_all(f, replacement)
    logger.debug(
        "Overwrote %d bytes at offset %d of %s (was %d bytes)",
        len(replacement),
        from_byte,
        path,
        file_size,
    )


def insert_at(path: PathLike, from_byte: int, insertion: bytes) -> None:
    """
    Insert `insertion` at `from_byte`, shifting everything after it towards the end.

    Everything from `from_byte` to the end of file is read into memory and written
    back after the insertion, so the cost grows with the distance from the end.
    Inserting near the start of a large file is expensive; batch such inserts.
    """
    file_size = _check_offset(path, from_byte)
    with open(path, "rb") as f:
        f.seek(from_byte)
        remainder = f.read()
    with open(path, "r+b", buffering=0) as f:
        f.seek(from_byte)
        _write_all(f, insertion)
        _write_all(f, remainder)
    logger.debug(
        "Inserted %d bytes at offset %d of %s (moved %d tail bytes, was %d bytes)",
        len(insertion),
        from_byte,
        path,
        len(remainder),
        file_size,
    )
