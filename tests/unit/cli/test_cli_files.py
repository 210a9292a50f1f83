"""Unit tests for the file command group."""

from pathlib import Path

import pytest
from easyfs.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "notes.txt").write_text("one\ntwo\nthree\n")
    return tmp_path


class TestCat:
    """Tests for file cat."""

    def test_cat(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "cat", "notes.txt"])

        assert result.exit_code == 0
        assert result.stdout == "one\ntwo\nthree\n"

    def test_cat_small_chunks(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "cat", "notes.txt", "--chunk-size", "3"])

        assert result.stdout == "one\ntwo\nthree\n"

    def test_cat_binary(self, in_tmp: Path) -> None:
        (in_tmp / "blob.bin").write_bytes(b"\x00\xff\x10")

        result = runner.invoke(app, ["file", "cat", "blob.bin"])

        assert result.stdout_bytes == b"\x00\xff\x10"

    def test_cat_missing(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "cat", "missing.txt"])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_cat_invalid_chunk_size(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "cat", "notes.txt", "--chunk-size", "0"])

        assert result.exit_code == 2


class TestLines:
    """Tests for file lines."""

    def test_lines(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "lines", "notes.txt"])

        assert result.stdout.splitlines() == ["one", "two", "three"]

    def test_lines_numbered(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "lines", "notes.txt", "--number"])

        assert result.stdout.splitlines()[1] == "     2  two"

    def test_lines_on_directory(self, in_tmp: Path) -> None:
        (in_tmp / "folder").mkdir()

        result = runner.invoke(app, ["file", "lines", "folder"])

        assert result.exit_code == 1
        assert "Not a file" in result.output


class TestWriteAndAppend:
    """Tests for file write and file append."""

    def test_write(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "write", "notes.txt", "replaced"])

        assert result.exit_code == 0
        assert (in_tmp / "notes.txt").read_text() == "replaced"

    def test_append_several(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "append", "log.txt", "a", "b", "c"])

        assert result.exit_code == 0
        assert (in_tmp / "log.txt").read_text() == "abc"
        assert "3 string(s)" in result.stdout

    def test_append_new_line(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "append", "notes.txt", "four", "--new-line"])

        assert result.exit_code == 0
        assert (in_tmp / "notes.txt").read_text() == "one\ntwo\nthree\n\nfour"

    def test_append_missing_directory(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "append", "nowhere/log.txt", "x"])

        assert result.exit_code == 1


class TestCopy:
    """Tests for file copy."""

    def test_copy(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "copy", "notes.txt", "backup"])

        assert result.exit_code == 0
        assert (in_tmp / "backup" / "notes.txt").read_text() == "one\ntwo\nthree\n"

    def test_copy_onto_itself(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "copy", "notes.txt", "."])

        assert result.exit_code == 1
        assert "onto itself" in result.output


class TestTouchAndRm:
    """Tests for file touch and file rm."""

    def test_touch_new(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "touch", "new.txt"])

        assert result.exit_code == 0
        assert "Created" in result.stdout
        assert (in_tmp / "new.txt").read_bytes() == b""

    def test_touch_existing(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "touch", "notes.txt"])

        assert result.exit_code == 0
        assert "left untouched" in result.stdout
        assert (in_tmp / "notes.txt").read_text() == "one\ntwo\nthree\n"

    def test_touch_overwrite(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "touch", "notes.txt", "--overwrite"])

        assert result.exit_code == 0
        assert (in_tmp / "notes.txt").read_bytes() == b""

    def test_touch_strict(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "touch", "notes.txt", "--strict"])

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_rm(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "rm", "notes.txt"])

        assert result.exit_code == 0
        assert not (in_tmp / "notes.txt").exists()

    def test_rm_missing(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "rm", "missing.txt"])

        assert result.exit_code == 1


class TestSize:
    """Tests for file size."""

    def test_size_bytes(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["file", "size", "notes.txt"])

        assert result.stdout.strip() == "14"

    def test_size_human(self, in_tmp: Path) -> None:
        (in_tmp / "big.bin").write_bytes(b"x" * 2048)

        result = runner.invoke(app, ["file", "size", "big.bin", "--human"])

        assert result.stdout.strip() == "2.0 KB"
