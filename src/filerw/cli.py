"""CLI entry point: argument parsing and subcommand dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from filerw import __version__
from filerw.config import load_config


def setup_logging(verbose: bool = False, quiet: bool = False, log_file: str | None = None) -> None:
    """
    Configure the filerw logger: level from --verbose/--quiet or the default config,
    console handler, optional file handler from --log-file.
    """
    log_cfg = load_config({"logging": {"file": log_file}}).get("logging") or {}
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = (log_cfg.get("level") or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    root = logging.getLogger("filerw")
    root.setLevel(level)
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        root.addHandler(console)
        path = log_cfg.get("file")
        if path:
            try:
                fh = logging.FileHandler(Path(path).expanduser(), encoding="utf-8")
            except OSError as e:
                root.warning("Cannot open log file %s: %s", path, e)
            else:
                fh.setFormatter(fmt)
                root.addHandler(fh)


def _offset(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"offset cannot be negative: {value}")
    return n


def _tier(value: str) -> tuple[int, int]:
    """MAX_BYTES:WORKERS, e.g. 1048576:1."""
    max_bytes, sep, workers = value.partition(":")
    try:
        if not sep:
            raise ValueError
        return int(max_bytes), int(workers)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected MAX_BYTES:WORKERS, got {value!r}") from None


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="filerw",
        description="Parallel reads of large text files and in-place byte-level edits.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    log_group.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")
    parser.add_argument("--log-file", help="Also write log records to this file.")

    # Same flags on subparsers so "filerw lines big.txt -v" works
    global_flags = argparse.ArgumentParser(add_help=False)
    log_grp = global_flags.add_mutually_exclusive_group()
    log_grp.add_argument("-v", "--verbose", action="store_true", help=argparse.SUPPRESS)
    log_grp.add_argument("-q", "--quiet", action="store_true", help=argparse.SUPPRESS)

    # Read policy for commands that go through the parallel reader
    read_flags = argparse.ArgumentParser(add_help=False)
    read_flags.add_argument(
        "--tier",
        dest="tiers",
        action="append",
        type=_tier,
        metavar="MAX_BYTES:WORKERS",
        help="Worker tier; repeat in ascending order. Replaces the default tiers.",
    )
    read_flags.add_argument("--max-workers", type=int, help="Workers for files larger than every tier (default: 16).")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    # Paths stay plain strings: pathlib would drop a trailing separator before validation.

    # lines
    p_lines = subparsers.add_parser(
        "lines",
        help="Load a text file in parallel and print its trimmed lines.",
        parents=[global_flags, read_flags],
    )
    p_lines.add_argument("path", help="File to load.")
    p_lines.add_argument("--allow-empty", action="store_true", help="Keep lines that are empty after trimming.")
    p_lines.add_argument("--error-on-empty", action="store_true", help="Exit with status 2 if the file yields no lines.")
    p_lines.add_argument("--count", action="store_true", help="Print only the number of lines.")
    p_lines.add_argument("--encoding", help="Text encoding (default: utf-8).")
    p_lines.add_argument("--errors", help="Decode error handler (default: replace).")
    p_lines.set_defaults(run="lines")

    # cat
    p_cat = subparsers.add_parser(
        "cat",
        help="Read a file in parallel and write its raw bytes to stdout.",
        parents=[global_flags, read_flags],
    )
    p_cat.add_argument("path", help="File to read.")
    p_cat.set_defaults(run="cat")

    # plan
    p_plan = subparsers.add_parser(
        "plan",
        help="Show how a file would be split into chunks.",
        parents=[global_flags, read_flags],
    )
    p_plan.add_argument("path", help="File to plan.")
    p_plan.set_defaults(run="plan")

    # put
    p_put = subparsers.add_parser("put", help="Write text to a file.", parents=[global_flags])
    p_put.add_argument("path", help="Target file.")
    p_put.add_argument("data", help="Text to write.")
    p_put.add_argument("--mode", "-m", default="OVERWRITE", help="APPEND or OVERWRITE (default: OVERWRITE).")
    p_put.add_argument("--create-parents", action="store_true", help="Create missing parent directories.")
    p_put.set_defaults(run="put")

    # overwrite
    p_over = subparsers.add_parser("overwrite", help="Overwrite bytes of an existing file at OFFSET.", parents=[global_flags])
    p_over.add_argument("path", help="Existing file.")
    p_over.add_argument("offset", type=_offset, help="Byte offset (at most the file size).")
    p_over.add_argument("data", help="Replacement text.")
    p_over.set_defaults(run="overwrite")

    # insert
    p_ins = subparsers.add_parser("insert", help="Insert text into an existing file at OFFSET.", parents=[global_flags])
    p_ins.add_argument("path", help="Existing file.")
    p_ins.add_argument("offset", type=_offset, help="Byte offset (at most the file size).")
    p_ins.add_argument("data", help="Text to insert.")
    p_ins.set_defaults(run="insert")

    args = parser.parse_args()
    setup_logging(
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
        log_file=getattr(args, "log_file", None),
    )
    run = getattr(args, "run", None)

    if run == "lines":
        from filerw.commands.lines import run as cmd_run
    elif run == "cat":
        from filerw.commands.cat import run as cmd_run
    elif run == "plan":
        from filerw.commands.plan import run as cmd_run
    elif run == "put":
        from filerw.commands.put import run as cmd_run
    elif run == "overwrite":
        from filerw.commands.edit import run_overwrite as cmd_run
    elif run == "insert":
        from filerw.commands.edit import run_insert as cmd_run
    else:
        parser.print_help()
        sys.exit(0)

    cmd_run(args)


if __name__ == "__main__":
    main()
