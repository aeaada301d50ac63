"""Unit tests for overwrite_at and insert_at."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from filerw.errors import GapNotAllowedError
from filerw.mutate import _write_all, insert_at, overwrite_at

CONTENT = b"Line 1\nLine 2\nLine 3\nLine 4\nLine 5\n"


@pytest.fixture
def target(tmp_path: Path) -> Path:
    f = tmp_path / "target.txt"
    f.write_bytes(CONTENT)
    return f


# --- overwrite_at ---


def test_overwrite_replaces_bytes_in_place(target: Path) -> None:
    overwrite_at(target, 5, b"X")
    assert target.read_bytes() == b"Line X\nLine 2\nLine 3\nLine 4\nLine 5\n"


def test_overwrite_at_end_appends(target: Path) -> None:
    overwrite_at(target, len(CONTENT), b"Line 6\n")
    assert target.read_bytes() == CONTENT + b"Line 6\n"


def test_overwrite_past_old_end_grows_file(target: Path) -> None:
    overwrite_at(target, len(CONTENT) - 2, b"5 and more\n")
    assert target.read_bytes() == CONTENT[:-2] + b"5 and more\n"


def test_overwrite_gap_is_refused(target: Path) -> None:
    with pytest.raises(GapNotAllowedError) as exc_info:
        overwrite_at(target, len(CONTENT) + 1, b"data")
    assert exc_info.value.offset == len(CONTENT) + 1
    assert exc_info.value.file_size == len(CONTENT)
    assert target.read_bytes() == CONTENT


def test_overwrite_empty_file_at_zero(tmp_path: Path) -> None:
    f = tmp_path / "empty.bin"
    f.write_bytes(b"")
    overwrite_at(f, 0, b"hello")
    assert f.read_bytes() == b"hello"


def test_overwrite_negative_offset(target: Path) -> None:
    with pytest.raises(ValueError, match="negative"):
        overwrite_at(target, -1, b"x")
    assert target.read_bytes() == CONTENT


def test_overwrite_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        overwrite_at(tmp_path / "missing.txt", 0, b"x")
    assert not (tmp_path / "missing.txt").exists()


# --- insert_at ---


@pytest.mark.parametrize("k", [0, 14, 17, len(CONTENT)])
def test_insert_at(target: Path, k: int) -> None:
    insertion = b"This piece of text\nshould be inserted\n"
    insert_at(target, k, insertion)
    assert target.read_bytes() == CONTENT[:k] + insertion + CONTENT[k:]


def test_insert_between_lines(target: Path) -> None:
    insert_at(target, len(b"Line 1\nLine 2\n"), b"inserted\n")
    assert target.read_bytes().split(b"\n")[:4] == [b"Line 1", b"Line 2", b"inserted", b"Line 3"]


def test_insert_empty_is_noop(target: Path) -> None:
    insert_at(target, 7, b"")
    assert target.read_bytes() == CONTENT


def test_insert_gap_is_refused(target: Path) -> None:
    with pytest.raises(GapNotAllowedError, match="gap not allowed"):
        insert_at(target, len(CONTENT) + 5, b"x")
    assert target.read_bytes() == CONTENT


def test_insert_large_tail(tmp_path: Path) -> None:
    f = tmp_path / "large.bin"
    content = bytes(range(256)) * 8192
    f.write_bytes(content)
    insert_at(f, 3, b"abc")
    assert f.read_bytes() == content[:3] + b"abc" + content[3:]


# --- short writes ---


class _ShortWriter(io.BytesIO):
    """Accepts at most three bytes per write call, like a short unbuffered write."""

    def write(self, data) -> int:
        return super().write(bytes(data[:3]))


def test_write_all_retries_short_writes() -> None:
    f = _ShortWriter()
    _write_all(f, b"0123456789")
    assert f.getvalue() == b"0123456789"
