"""Parallel chunked reading: planning, concurrent reads, assembly, line splitting."""

from filerw.reader.assembler import assemble
from filerw.reader.lines import split_lines
from filerw.reader.loader import fast_load_lines, parallel_read
from filerw.reader.models import (
    DEFAULT_READ_POLICY,
    ChunkDescriptor,
    ChunkFailure,
    ChunkResult,
    ReadPolicy,
    WorkerTier,
)
from filerw.reader.parallel import read_chunks
from filerw.reader.planner import plan_chunks

__all__ = [
    "ChunkDescriptor",
    "ChunkFailure",
    "ChunkResult",
    "DEFAULT_READ_POLICY",
    "ReadPolicy",
    "WorkerTier",
    "assemble",
    "fast_load_lines",
    "parallel_read",
    "plan_chunks",
    "read_chunks",
    "split_lines",
]
