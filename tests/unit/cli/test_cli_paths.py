"""Unit tests for the path command group."""

from pathlib import Path

import pytest
from easyfs.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a.txt").write_text("alpha")
    (tmp_path / "dest").mkdir()
    return tmp_path


class TestInfo:
    """Tests for path info."""

    def test_info_file(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["path", "info", "a.txt"])

        assert result.exit_code == 0
        assert "Kind" in result.stdout
        assert "file" in result.stdout
        assert "5 B" in result.stdout
        assert "Modified" in result.stdout

    def test_info_directory(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["path", "info", "dest"])

        assert result.exit_code == 0
        assert "directory" in result.stdout
        assert "Size" not in result.stdout

    def test_info_missing(self, in_tmp: Path) -> None:
        """A missing path is described, not an error."""
        result = runner.invoke(app, ["path", "info", "ghost"])

        assert result.exit_code == 0
        assert "missing" in result.stdout
        assert "False" in result.stdout


class TestRenameAndMove:
    """Tests for path rename and path move."""

    def test_rename(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["path", "rename", "a.txt", "b.txt"])

        assert result.exit_code == 0
        assert (in_tmp / "b.txt").read_text() == "alpha"
        assert not (in_tmp / "a.txt").exists()

    def test_rename_invalid_name(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["path", "rename", "a.txt", "x/y"])

        assert result.exit_code == 1
        assert "Invalid name" in result.output

    def test_move(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["path", "move", "a.txt", "dest"])

        assert result.exit_code == 0
        assert (in_tmp / "dest" / "a.txt").exists()

    def test_move_missing(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["path", "move", "ghost", "dest"])

        assert result.exit_code == 1


class TestChmod:
    """Tests for path chmod."""

    def test_chmod(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["path", "chmod", "a.txt", "600"])

        assert result.exit_code == 0
        assert (in_tmp / "a.txt").stat().st_mode & 0o777 == 0o600

    def test_chmod_invalid_mode(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["path", "chmod", "a.txt", "9x"])

        assert result.exit_code == 1
        assert "Invalid octal mode" in result.output
