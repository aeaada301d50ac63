"""Data models for the parallel read path (plan, per-chunk results, read policy)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class ChunkDescriptor:
    """One planned byte range of a file, read by a single task."""

    index: int  # 0-based, reassembly order
    start_offset: int
    requested_length: int

    @property
    def end_offset(self) -> int:
        return self.start_offset + self.requested_length


@dataclass(frozen=True)
class ChunkResult:
    """What one read task hands back: the bytes it got, or the error that stopped it."""

    index: int
    start_offset: int
    requested_length: int
    content: bytes = b""
    error: Optional[OSError] = None

    @property
    def read_length(self) -> int:
        return len(self.content)

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ChunkFailure:
    """A failed chunk inside a ChunkReadError."""

    index: int
    start_offset: int
    requested_length: int
    error: OSError

    def __str__(self) -> str:
        return (
            f"chunk {self.index} "
            f"[{self.start_offset}:{self.start_offset + self.requested_length}]: {self.error}"
        )


@dataclass(frozen=True)
class WorkerTier:
    """Files of at most `max_bytes` bytes are read with `workers` tasks."""

    max_bytes: int
    workers: int


DEFAULT_TIERS: tuple[WorkerTier, ...] = (
    WorkerTier(max_bytes=1_048_576, workers=1),  # 1 MiB
    WorkerTier(max_bytes=134_217_728, workers=8),  # 128 MiB
)


@dataclass(frozen=True)
class ReadPolicy:
    """
    Size-driven worker count for parallel reads.

    Tiers are checked in ascending order of `max_bytes`; the first tier whose limit
    is >= the file size wins. Larger files get `max_workers`. The count is fixed by
    size alone and does not look at the number of CPUs.
    """

    tiers: tuple[WorkerTier, ...] = field(default=DEFAULT_TIERS)
    max_workers: int = 16

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        previous = -1
        for tier in self.tiers:
            if tier.workers < 1:
                raise ValueError(f"tier workers must be >= 1, got {tier.workers}")
            if tier.max_bytes <= previous:
                raise ValueError("tiers must be sorted by strictly increasing max_bytes")
            previous = tier.max_bytes

    def workers_for(self, file_size: int) -> int:
        for tier in self.tiers:
            if file_size <= tier.max_bytes:
                return tier.workers
        return self.max_workers

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReadPolicy:
        """Build from the `read` config section; missing keys keep the defaults."""
        raw_tiers = data.get("tiers")
        if raw_tiers is None:
            tiers = DEFAULT_TIERS
        else:
            tiers = tuple(
                WorkerTier(max_bytes=int(t["max_bytes"]), workers=int(t["workers"]))
                for t in raw_tiers
            )
        return cls(tiers=tiers, max_workers=int(data.get("max_workers", 16)))


DEFAULT_READ_POLICY = ReadPolicy()
