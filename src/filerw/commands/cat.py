"""Read a file with parallel chunk reads and copy it to stdout."""

from __future__ import annotations

import sys
from argparse import Namespace

from filerw.config import config_from_args, read_policy
from filerw.errors import FileRWError
from filerw.reader import parallel_read


def run(args: Namespace) -> None:
    """Run the cat command."""
    try:
        data = parallel_read(args.path, policy=read_policy(config_from_args(args)))
    except (FileRWError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()
