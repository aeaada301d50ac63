"""Write text to a file in APPEND or OVERWRITE mode."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from filerw.errors import FileRWError
from filerw.files import file_put_contents


def run(args: Namespace) -> None:
    """Run the put command."""
    path: str = args.path
    try:
        file_put_contents(
            path,
            args.data,
            getattr(args, "mode", "OVERWRITE"),
            bool(getattr(args, "create_parents", False)),
        )
    except (FileRWError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Wrote {len(args.data.encode('utf-8'))} bytes to {Path(path).as_posix()}.")
