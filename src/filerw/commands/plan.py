"""Show the chunk plan a parallel read would use for a file."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from filerw.config import config_from_args, read_policy
from filerw.errors import FileRWError
from filerw.paths import validate_file_path
from filerw.reader import ChunkDescriptor, plan_chunks


def _print_plan(path: Path, file_size: int, plan: list[ChunkDescriptor]) -> None:
    print(f"File: {path.as_posix()}")
    print(f"  size:    {file_size} bytes")
    print(f"  workers: {len(plan)}")
    print()
    print("  Chunks:")
    for chunk in plan:
        print(
            f"    #{chunk.index:<3} [{chunk.start_offset}, {chunk.end_offset})"
            f"  {chunk.requested_length} bytes"
        )


def run(args: Namespace) -> None:
    """Run the plan command."""
    try:
        file_size = validate_file_path(args.path, file_should_exist=True)
        plan = plan_chunks(file_size, read_policy(config_from_args(args)))
    except (FileRWError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    _print_plan(Path(args.path), file_size, plan)
