"""Unit tests for the dir command group."""

import json
from pathlib import Path

import pytest
from easyfs.cli.main import app
from easyfs.core.config import FSConfig, set_config
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def in_tmp(sample_root: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from tmp_path so the sample tree is reachable as 'root'."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestDirHelp:
    """Tests for dir command help."""

    def test_dir_help(self) -> None:
        result = runner.invoke(app, ["dir", "--help"])
        assert result.exit_code == 0
        for command in ("ls", "tree", "find", "mkdir", "copy", "clear", "rm"):
            assert command in result.stdout


class TestLs:
    """Tests for dir ls."""

    def test_ls_table(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "ls", "root"])

        assert result.exit_code == 0
        for name in ("a.txt", "b.txt", "c.log", "sub"):
            assert name in result.stdout

    def test_ls_json(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "ls", "root", "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == ["a.txt", "b.txt", "c.log", "sub"]

    def test_ls_files_only(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "ls", "root", "--files", "-f", "json"])

        assert json.loads(result.stdout) == ["a.txt", "b.txt", "c.log"]

    def test_ls_dirs_only(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "ls", "root", "--dirs", "-f", "json"])

        assert json.loads(result.stdout) == ["sub"]

    def test_ls_empty(self, in_tmp: Path) -> None:
        (in_tmp / "empty").mkdir()

        result = runner.invoke(app, ["dir", "ls", "empty"])

        assert result.exit_code == 0
        assert "is empty" in result.stdout

    def test_ls_missing(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "ls", "missing"])

        assert result.exit_code == 1
        assert "Error" in result.output


class TestTree:
    """Tests for dir tree."""

    def test_tree(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "tree", "root"])

        assert result.exit_code == 0
        assert "deep/" in result.stdout
        assert "e.md" in result.stdout
        assert "5 files" in result.stdout

    def test_tree_json(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "tree", "root", "-f", "json"])

        data = json.loads(result.stdout)
        assert data["files"] == ["a.txt", "b.txt", "c.log"]
        assert data["dirs"]["sub"]["dirs"]["deep"] == {"dirs": {}, "files": ["e.md"]}

    def test_tree_not_a_directory(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "tree", "root/a.txt"])

        assert result.exit_code == 1
        assert "Not a directory" in result.output


class TestFind:
    """Tests for dir find."""

    def test_find_non_recursive(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "find", "*.txt", "root", "--no-recursive"])

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[:2] == ["root/a.txt", "root/b.txt"]
        assert "2 match(es)" in result.stdout

    def test_find_recursive_with_limit(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "find", "*.txt", "root", "--limit", "1"])

        assert result.stdout.splitlines()[0] == "root/a.txt"
        assert "1 match(es)" in result.stdout

    def test_find_dirs(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "find", "*", "root", "--type", "dir"])

        assert result.stdout.splitlines()[:2] == ["root/sub", "root/sub/deep"]

    def test_find_limit_from_config(self, in_tmp: Path) -> None:
        set_config(FSConfig(search_quantity=2))

        result = runner.invoke(app, ["dir", "find", "*", "root"])

        assert "2 match(es)" in result.stdout

    def test_find_invalid_pattern(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "find", "[oops", "root"])

        assert result.exit_code == 1
        assert "Unterminated" in result.output


class TestMkdirAndRm:
    """Tests for dir mkdir and dir rm."""

    def test_mkdir(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "mkdir", "x/y/z"])

        assert result.exit_code == 0
        assert (in_tmp / "x" / "y" / "z").is_dir()

    def test_rm_non_empty_needs_recursive(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "rm", "root/sub"])

        assert result.exit_code == 1
        assert (in_tmp / "root" / "sub").is_dir()

    def test_rm_recursive(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "rm", "root/sub", "--recursive"])

        assert result.exit_code == 0
        assert not (in_tmp / "root" / "sub").exists()


class TestCopy:
    """Tests for dir copy."""

    def test_copy(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "copy", "root", "backup"])

        assert result.exit_code == 0
        assert (in_tmp / "backup" / "sub" / "deep" / "e.md").read_text() == "echo"

    def test_copy_into_itself(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "copy", "root", "root/sub/inner"])

        assert result.exit_code == 1
        assert not (in_tmp / "root" / "sub" / "inner").exists()


class TestClear:
    """Tests for dir clear."""

    def test_clear_confirmed(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "clear", "root", "--force"], input="y\n")

        assert result.exit_code == 0
        assert list((in_tmp / "root").iterdir()) == []

    def test_clear_aborted(self, in_tmp: Path) -> None:
        result = runner.invoke(app, ["dir", "clear", "root"], input="n\n")

        assert result.exit_code == 0
        assert "Aborted" in result.stdout
        assert (in_tmp / "root" / "a.txt").exists()

    def test_clear_reports_failures(self, in_tmp: Path) -> None:
        """Without --force, non-empty subdirectories are listed as failures."""
        result = runner.invoke(app, ["dir", "clear", "root", "--yes"])

        assert result.exit_code == 1
        assert "root/sub" in result.output
        assert not (in_tmp / "root" / "a.txt").exists()
