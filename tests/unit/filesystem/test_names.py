"""Unit tests for portable name validation."""

import pytest
from easyfs.filesystem.names import is_valid_dir_name, is_valid_file_name


class TestIsValidFileName:
    """Tests for is_valid_file_name."""

    @pytest.mark.parametrize("name", ["a.txt", "report 2024.pdf", ".hidden", "trailing."])
    def test_valid(self, name: str) -> None:
        assert is_valid_file_name(name)

    @pytest.mark.parametrize("name", ["", "a/b", "a\\b", "what?", "x*", "pipe|", "nul\x00"])
    def test_invalid(self, name: str) -> None:
        assert not is_valid_file_name(name)


class TestIsValidDirName:
    """Tests for is_valid_dir_name."""

    @pytest.mark.parametrize("name", ["src", ".", "..", ".config"])
    def test_valid(self, name: str) -> None:
        assert is_valid_dir_name(name)

    @pytest.mark.parametrize("name", ["", "ends.", "ends ", "a:b"])
    def test_invalid(self, name: str) -> None:
        assert not is_valid_dir_name(name)
