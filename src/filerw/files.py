"""Whole-file read/write helpers and a buffered sequential writer."""

from __future__ import annotations

import logging

from filerw.paths import PathLike, WriteMode, open_for_write, validate_file_path

logger = logging.getLogger(__name__)


def _to_bytes(data: str | bytes) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def file_put_contents(
    path: PathLike,
    data: str | bytes,
    mode: WriteMode | str,
    create_parents: bool = False,
) -> None:
    """Write `data` to `path` (str as UTF-8) in APPEND or OVERWRITE mode."""
    with open_for_write(path, mode, create_parents) as f:
        f.write(_to_bytes(data))


def file_read_contents(path: PathLike, encoding: str = "utf-8") -> str:
    """Return the whole file as text. Missing file raises FileNotFoundError."""
    validate_file_path(path, file_should_exist=True)
    with open(path, "rb") as f:
        return f.read().decode(encoding)


class BufferedFileWriter:
    """
    Sequential writer for large amounts of data written in many small pieces.

    Use as a context manager, or call close() when done: close flushes the buffer
    and releases the file.
    """

    def __init__(
        self,
        path: PathLike,
        mode: WriteMode | str,
        create_parents: bool = False,
    ) -> None:
        self.path = path
        self._file = open_for_write(path, mode, create_parents)

    @property
    def closed(self) -> bool:
        return self._file is None

    def write(self, data: str | bytes) -> int:
        if self._file is None:
            raise ValueError("write to closed BufferedFileWriter")
        return self._file.write(_to_bytes(data))

    def flush(self) -> None:
        if self._file is not None:
            self._file.flush()

    def close(self) -> None:
        if self._file is None:
            return
        try:
            self._file.flush()
        finally:
            self._file.close()
            self._file = None
        logger.debug("Closed buffered writer for %s", self.path)

    def __enter__(self) -> BufferedFileWriter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
