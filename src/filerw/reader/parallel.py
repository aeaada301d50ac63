"""
Parallel chunk reads over one open file.

Each chunk is read by its own thread with a positioned read (os.pread), so no task
moves a cursor another task depends on. Where os.pread is unavailable each task
opens a private handle instead. Failed chunks do not stop their siblings: every
task runs to completion and failures are reported together afterwards.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import BinaryIO, Callable

from filerw.errors import ChunkReadError
from filerw.reader.models import ChunkDescriptor, ChunkFailure, ChunkResult

logger = logging.getLogger(__name__)

HAS_PREAD = hasattr(os, "pread")

ReadAt = Callable[[int, int], bytes]


def _read_range(read_at: ReadAt, chunk: ChunkDescriptor) -> bytes:
    """Read chunk.requested_length bytes at chunk.start_offset; stop early only at EOF."""
    parts: list[bytes] = []
    remaining = chunk.requested_length
    offset = chunk.start_offset
    while remaining > 0:
        data = read_at(remaining, offset)
        if not data:
            break
        parts.append(data)
        remaining -= len(data)
        offset += len(data)
    return b"".join(parts)


def _private_handle_reader(f: BinaryIO) -> ReadAt:
    def read_at(size: int, offset: int) -> bytes:
        f.seek(offset)
        return f.read(size)

    return read_at


def _read_chunk(chunk: ChunkDescriptor, fd: int | None, path: str | None) -> ChunkResult:
    try:
        if fd is not None:
            content = _read_range(lambda size, offset: os.pread(fd, size, offset), chunk)
        else:
            with open(path, "rb") as own:
                content = _read_range(_private_handle_reader(own), chunk)
    except OSError as e:
        logger.warning("Chunk %d at offset %d failed: %s", chunk.index, chunk.start_offset, e)
        return ChunkResult(
            index=chunk.index,
            start_offset=chunk.start_offset,
            requested_length=chunk.requested_length,
            error=e,
        )
    return ChunkResult(
        index=chunk.index,
        start_offset=chunk.start_offset,
        requested_length=chunk.requested_length,
        content=content,
    )


def read_chunks(
    handle: BinaryIO,
    plan: list[ChunkDescriptor],
    path: str | os.PathLike[str] | None = None,
) -> list[ChunkResult]:
    """
    Read every planned chunk concurrently and return the results in completion order.

    One thread per chunk. Blocks until all of them have finished. Raises
    ChunkReadError listing every failed chunk if any read failed; there is no
    partial result.
    """
    if not plan:
        return []
    if HAS_PREAD:
        fd: int | None = handle.fileno()
        own_path = None
    else:
        fd = None
        own_path = os.fspath(path) if path is not None else handle.name

    results: list[ChunkResult] = []
    with ThreadPoolExecutor(max_workers=len(plan), thread_name_prefix="filerw-read") as pool:
        futures = [pool.submit(_read_chunk, chunk, fd, own_path) for chunk in plan]
        for future in as_completed(futures):
            results.append(future.result())

    failures = [
        ChunkFailure(
            index=r.index,
            start_offset=r.start_offset,
            requested_length=r.requested_length,
            error=r.error,
        )
        for r in results
        if r.error is not None
    ]
    if failures:
        raise ChunkReadError(failures)
    return results
