"""In-place edits of existing files: overwrite and insert at a byte offset."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path
from typing import Callable

from filerw.errors import FileRWError
from filerw.mutate import insert_at, overwrite_at


def _run_edit(args: Namespace, edit: Callable[[str, int, bytes], None], verb: str) -> None:
    path: str = args.path
    data = args.data.encode("utf-8")
    try:
        edit(path, args.offset, data)
    except (FileRWError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"{verb} {len(data)} bytes at offset {args.offset} of {Path(path).as_posix()}.")


def run_overwrite(args: Namespace) -> None:
    """Run the overwrite command."""
    _run_edit(args, overwrite_at, "Overwrote")


def run_insert(args: Namespace) -> None:
    """Run the insert command."""
    _run_edit(args, insert_at, "Inserted")
