"""Path validation and opening files for writing (optionally creating parent directories)."""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from filerw.errors import DirectoryCreationError, PathSyntaxError, UnsupportedModeError

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


class WriteMode(str, Enum):
    """How an existing file is treated when opened for writing."""

    APPEND = "APPEND"
    OVERWRITE = "OVERWRITE"


_OPEN_MODES = {
    WriteMode.APPEND: "ab",
    WriteMode.OVERWRITE: "w+b",  # create or truncate, read/write
}


def parse_write_mode(mode: WriteMode | str) -> WriteMode:
    """Return the WriteMode for `mode`; only the exact names APPEND and OVERWRITE are accepted."""
    if isinstance(mode, WriteMode):
        return mode
    try:
        return WriteMode(mode)
    except ValueError:
        raise UnsupportedModeError(
            f"not supported mode: {mode}. Only APPEND and OVERWRITE are supported"
        ) from None


def validate_file_path(path: PathLike, file_should_exist: bool = False) -> int:
    """
    Check path syntax and, if `file_should_exist`, that the file is there.

    Syntax: the path must not be empty and must end with a file name, not a
    separator. A missing file raises FileNotFoundError. The separator check only
    works on a str path: pathlib.Path("out/") is already Path("out") and Path("")
    is Path("."), so pass user input through unchanged.

    Returns the file size in bytes when `file_should_exist`, else 0.
    """
    raw = os.fspath(path)
    if raw == "":
        raise PathSyntaxError("path cannot be empty")
    separators = (os.sep,) + ((os.altsep,) if os.altsep else ())
    if raw.endswith(separators):
        raise PathSyntaxError(
            f'full file path cannot end with "{raw[-1]}", it should end with file name'
        )
    if file_should_exist:
        return os.stat(raw).st_size
    return 0


def ensure_parent_dirs(path: PathLike) -> None:
    """Create every missing directory above `path`."""
    parent = Path(path).parent
    if parent == Path(""):
        return
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(f'cannot create directory by path "{parent}"') from e


def open_for_write(
    path: PathLike,
    mode: WriteMode | str,
    create_parents: bool = False,
) -> BinaryIO:
    """
    Open `path` for binary writing in APPEND or OVERWRITE mode; the file is created
    if missing. With `create_parents`, missing directories are created first;
    without it a missing directory surfaces as FileNotFoundError from open().
    """
    validate_file_path(path)
    write_mode = parse_write_mode(mode)
    if create_parents:
        ensure_parent_dirs(path)
    logger.debug("Opening %s for %s", path, write_mode.value)
    return open(path, _OPEN_MODES[write_mode])
