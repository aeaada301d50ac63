"""Exception hierarchy for path, read, assembly and mutation failures."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from filerw.reader.models import ChunkFailure


class FileRWError(Exception):
    """Base class for all filerw errors."""


class PathSyntaxError(FileRWError, ValueError):
    """Path string is empty or does not end with a file name."""


class UnsupportedModeError(FileRWError, ValueError):
    """Write mode is neither APPEND nor OVERWRITE."""


class DirectoryCreationError(FileRWError):
    """Parent directories of a path could not be created."""


class FileEmptyError(FileRWError):
    """File produced no lines and the caller asked for this to be an error."""

    def __init__(self, path: str = "") -> None:
        self.path = path
        super().__init__(f"file empty: {path}" if path else "file empty")


class ChunkReadError(FileRWError):
    """
    One or more chunk reads of a parallel read failed.

    `failures` lists every failed chunk (sorted by index); the message joins their
    individual error messages.
    """

    def __init__(self, failures: list[ChunkFailure]) -> None:
        self.failures = sorted(failures, key=lambda f: f.index)
        detail = "; ".join(str(f) for f in self.failures)
        super().__init__(f"{len(self.failures)} chunk read(s) failed: {detail}")

    @property
    def failed_indexes(self) -> list[int]:
        return [f.index for f in self.failures]


class AssemblyError(FileRWError):
    """Chunk results cannot be put back together into one buffer."""


class SizeMismatchError(AssemblyError):
    """Assembled buffer length differs from the file size seen at planning time."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"file size error: expected [{expected}], got [{actual}] bytes")


class GapNotAllowedError(FileRWError):
    """Write offset lies beyond the current end of file."""

    def __init__(self, offset: int, file_size: int) -> None:
        self.offset = offset
        self.file_size = file_size
        super().__init__(
            f"gap not allowed: offset {offset} is beyond end of file ({file_size} bytes)"
        )
