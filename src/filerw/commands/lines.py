"""Load a text file in parallel and print its lines."""

from __future__ import annotations

import sys
from argparse import Namespace

from filerw.config import config_from_args, decoding, read_policy
from filerw.errors import FileEmptyError, FileRWError
from filerw.reader import fast_load_lines


def run(args: Namespace) -> None:
    """Run the lines command: print each trimmed line, or only the count with --count."""
    path: str = args.path
    config = config_from_args(args)
    try:
        encoding, errors = decoding(config)
        lines = fast_load_lines(
            path,
            allow_empty_lines=getattr(args, "allow_empty", False),
            return_error_on_empty_file=getattr(args, "error_on_empty", False),
            policy=read_policy(config),
            encoding=encoding,
            errors=errors,
        )
    except FileEmptyError:
        print(f"Error: file is empty: {path}", file=sys.stderr)
        sys.exit(2)
    except (FileRWError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if getattr(args, "count", False):
        print(len(lines))
        return
    for line in lines:
        print(line)
