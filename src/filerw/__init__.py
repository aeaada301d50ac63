"""Fast parallel reads of large text files and in-place byte-level edits."""

from filerw.errors import (
    AssemblyError,
    ChunkReadError,
    DirectoryCreationError,
    FileEmptyError,
    FileRWError,
    GapNotAllowedError,
    PathSyntaxError,
    SizeMismatchError,
    UnsupportedModeError,
)
from filerw.files import BufferedFileWriter, file_put_contents, file_read_contents
from filerw.mutate import insert_at, overwrite_at
from filerw.paths import WriteMode, open_for_write, parse_write_mode, validate_file_path
from filerw.reader import (
    ChunkDescriptor,
    ChunkFailure,
    ChunkResult,
    ReadPolicy,
    WorkerTier,
    assemble,
    fast_load_lines,
    parallel_read,
    plan_chunks,
    read_chunks,
    split_lines,
)

__version__ = "0.1.0"

__all__ = [
    "AssemblyError",
    "BufferedFileWriter",
    "ChunkDescriptor",
    "ChunkFailure",
    "ChunkReadError",
    "ChunkResult",
    "DirectoryCreationError",
    "FileEmptyError",
    "FileRWError",
    "GapNotAllowedError",
    "PathSyntaxError",
    "ReadPolicy",
    "SizeMismatchError",
    "UnsupportedModeError",
    "WorkerTier",
    "WriteMode",
    "assemble",
    "fast_load_lines",
    "file_put_contents",
    "file_read_contents",
    "insert_at",
    "open_for_write",
    "overwrite_at",
    "parallel_read",
    "parse_write_mode",
    "plan_chunks",
    "read_chunks",
    "split_lines",
    "validate_file_path",
]
