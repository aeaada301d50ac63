"""Public read path: plan, read in parallel, assemble, split into lines."""

from __future__ import annotations

import logging
import os

from filerw.errors import FileEmptyError
from filerw.paths import validate_file_path
from filerw.reader.assembler import assemble
from filerw.reader.lines import split_lines
from filerw.reader.models import ReadPolicy
from filerw.reader.parallel import read_chunks
from filerw.reader.planner import plan_chunks

logger = logging.getLogger(__name__)


def parallel_read(path: str | os.PathLike[str], policy: ReadPolicy | None = None) -> bytes:
    """
    Load the whole file at `path` with size-driven parallel chunk reads.

    Raises FileNotFoundError for a missing file, ChunkReadError if any chunk read
    failed, SizeMismatchError if the file changed size while being read.
    """
    file_size = validate_file_path(path, file_should_exist=True)
    plan = plan_chunks(file_size, policy)
    logger.debug("Reading %s (%d bytes) with %d worker(s)", path, file_size, len(plan))
    with open(path, "rb", buffering=0) as f:
        results = read_chunks(f, plan, path=path)
    return assemble(results, file_size)


def fast_load_lines(
    path: str | os.PathLike[str],
    allow_empty_lines: bool = False,
    return_error_on_empty_file: bool = False,
    policy: ReadPolicy | None = None,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> list[str]:
    """
    Load a (large) text file as a list of trimmed lines.

    Two errors are meant to be checked for rather than treated as fatal:
    FileNotFoundError (nothing there yet) and, when `return_error_on_empty_file`
    is set, FileEmptyError (file exists but yields no lines). Both let a caller
    generate the data and create the file instead of giving up.
    """
    data = parallel_read(path, policy)
    lines = split_lines(data, allow_empty_lines, encoding=encoding, errors=errors)
    if return_error_on_empty_file and not lines:
        raise FileEmptyError(os.fspath(path))
    return lines
