"""Chunk planning: split a file size into balanced byte ranges, one per worker."""

from __future__ import annotations

import logging

from filerw.reader.models import DEFAULT_READ_POLICY, ChunkDescriptor, ReadPolicy

logger = logging.getLogger(__name__)


def plan_chunks(file_size: int, policy: ReadPolicy | None = None) -> list[ChunkDescriptor]:
    """
    Return the read plan for a file of `file_size` bytes.

    chunk_size = ceil(file_size / workers). Every chunk but the last is chunk_size
    long; the last one takes what is left (equal to chunk_size when the size divides
    evenly). A zero-byte file gets one empty chunk.
    """
    if file_size < 0:
        raise ValueError(f"file size cannot be negative: {file_size}")
    policy = policy or DEFAULT_READ_POLICY
    workers = policy.workers_for(file_size)

    chunk_size = (file_size + workers - 1) // workers
    if chunk_size == 0:
        return [ChunkDescriptor(index=0, start_offset=0, requested_length=0)]

    # A policy may give a tiny file more workers than it has bytes to share.
    count = (file_size + chunk_size - 1) // chunk_size
    if count < workers:
        logger.debug("Reducing workers from %d to %d for %d bytes", workers, count, file_size)
    last_chunk_size = file_size - chunk_size * (count - 1)

    plan = [
        ChunkDescriptor(
            index=i,
            start_offset=i * chunk_size,
            requested_length=chunk_size if i < count - 1 else last_chunk_size,
        )
        for i in range(count)
    ]
    logger.debug(
        "Planned %d chunk(s) of %d bytes (last %d) for %d bytes",
        count,
        chunk_size,
        last_chunk_size,
        file_size,
    )
    return plan
