"""Split an assembled byte buffer into trimmed text lines."""

from __future__ import annotations

# Unicode White_Space characters. str.strip() with no argument also removes the
# \x1c-\x1f separator controls, which are kept as line content.
TRIM_CHARS = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def split_lines(
    data: bytes,
    allow_empty_lines: bool = False,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> list[str]:
    """
    Split `data` on line feeds and strip surrounding Unicode whitespace (including
    \\r) from each line. The \\x1c-\\x1f separator controls are not trimmed.

    Lines that are empty after stripping are dropped unless `allow_empty_lines`.
    A last line without a terminating line feed is kept; a line feed at the very
    end of the buffer does not open another line. The encoding must keep b"\\n"
    unambiguous (UTF-8, ASCII, Latin-1 and the like).
    """
    if not data:
        return []
    # Upper bound on the number of lines; trimmed to the real count at the end.
    lines = [""] * (data.count(b"\n") + 1)
    count = 0
    start = 0
    end = len(data)
    while start < end:
        newline = data.find(b"\n", start)
        stop = end if newline == -1 else newline
        line = data[start:stop].decode(encoding, errors).strip(TRIM_CHARS)
        if line or allow_empty_lines:
            lines[count] = line
            count += 1
        if newline == -1:
            break
        start = newline + 1
    del lines[count:]
    return lines
