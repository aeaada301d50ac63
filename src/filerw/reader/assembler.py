"""Put chunk results back together in index order and check the total size."""

from __future__ import annotations

import logging
from typing import Iterable

from filerw.errors import AssemblyError, SizeMismatchError
from filerw.reader.models import ChunkResult

logger = logging.getLogger(__name__)


def assemble(results: Iterable[ChunkResult], expected_size: int) -> bytes:
    """
    Concatenate chunk contents ordered by index.

    Results may arrive in any order. Indexes must run 0..n-1 without gaps or
    duplicates. A total length different from `expected_size` means the file
    changed size after planning (or a read came up short) and raises
    SizeMismatchError.
    """
    ordered = sorted(results, key=lambda r: r.index)
    indexes = [r.index for r in ordered]
    if indexes != list(range(len(ordered))):
        raise AssemblyError(f"chunk indexes are not contiguous from 0: {indexes}")
    failed = [r.index for r in ordered if r.error is not None]
    if failed:
        raise AssemblyError(f"cannot assemble failed chunks: {failed}")

    # join sizes the output once from all parts before copying
    buffer = b"".join(r.content for r in ordered)
    if len(buffer) != expected_size:
        raise SizeMismatchError(expected_size, len(buffer))
    logger.debug("Assembled %d chunk(s) into %d bytes", len(ordered), len(buffer))
    return buffer
