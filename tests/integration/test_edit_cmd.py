"""Integration tests: filerw put / overwrite / insert."""

from __future__ import annotations

from pathlib import Path

import pytest

from filerw.commands.edit import run_insert, run_overwrite
from filerw.commands.put import run as put_run

TEST_DATA = "Line 1\nLine 2\nLine 3\nLine 4\nLine 5\n"


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


def _put_args(path: Path | str, data: str, mode: str = "OVERWRITE", create_parents: bool | None = None) -> object:
    return type("Args", (), {"path": str(path), "data": data, "mode": mode, "create_parents": create_parents})()


def _edit_args(path: Path, offset: int, data: str) -> object:
    return type("Args", (), {"path": str(path), "offset": offset, "data": data})()


def test_put_then_insert_between_lines(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    f = workdir / "InsertTest.txt"
    put_run(_put_args(f, TEST_DATA))
    insertion = "This piece of text\nshould be inserted\nbetween 2nd and 3rd lines\n"
    run_insert(_edit_args(f, len("Line 1\nLine 2\n"), insertion))
    assert f.read_text().splitlines() == [
        "Line 1",
        "Line 2",
        "This piece of text",
        "should be inserted",
        "between 2nd and 3rd lines",
        "Line 3",
        "Line 4",
        "Line 5",
    ]
    assert "Inserted" in capsys.readouterr().out


def test_put_append_creates_parents(workdir: Path) -> None:
    f = workdir / "related" / "to" / "APPENDABLE_FILE.TXT"
    put_run(_put_args(f, "appended\n", mode="APPEND", create_parents=True))
    put_run(_put_args(f, "appended\n", mode="APPEND", create_parents=True))
    assert f.read_text() == "appended\nappended\n"


def test_put_create_parents_off_by_default(workdir: Path) -> None:
    f = workdir / "a" / "b" / "c.txt"
    with pytest.raises(SystemExit):
        put_run(_put_args(f, "x"))
    assert not (workdir / "a").exists()


@pytest.mark.parametrize(
    ("path", "message"),
    [("outdir/", "should end with file name"), ("", "path cannot be empty")],
)
def test_put_bad_path_syntax_exits_1_and_creates_nothing(
    workdir: Path, capsys: pytest.CaptureFixture[str], path: str, message: str
) -> None:
    with pytest.raises(SystemExit) as exc_info:
        put_run(_put_args(path, "hello", create_parents=True))
    assert exc_info.value.code == 1
    assert message in capsys.readouterr().err
    assert list(workdir.iterdir()) == []


def test_put_missing_directory_exits_1(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    f = workdir / "not" / "existing" / "HELLO_WORLD.TXT"
    with pytest.raises(SystemExit) as exc_info:
        put_run(_put_args(f, "HELLO WORLD\n", mode="APPEND"))
    assert exc_info.value.code == 1
    assert not f.exists()


def test_put_bad_mode_exits_1(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        put_run(_put_args(workdir / "x.txt", "x", mode="append"))
    assert "Only APPEND and OVERWRITE" in capsys.readouterr().err


def test_overwrite_at_end_appends(workdir: Path) -> None:
    f = workdir / "over.txt"
    f.write_text(TEST_DATA)
    run_overwrite(_edit_args(f, len(TEST_DATA), "Line 6\n"))
    assert f.read_text() == TEST_DATA + "Line 6\n"


def test_overwrite_gap_exits_1_and_leaves_file(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    f = workdir / "over.txt"
    f.write_text(TEST_DATA)
    with pytest.raises(SystemExit) as exc_info:
        run_overwrite(_edit_args(f, len(TEST_DATA) + 1, "x"))
    assert exc_info.value.code == 1
    assert "gap not allowed" in capsys.readouterr().err
    assert f.read_text() == TEST_DATA
