"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from easyfs.core.config import FSConfig, set_config
from easyfs.filesystem.directory import Directory
from rich.logging import RichHandler


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[FSConfig]:
    """Point the config directory at tmp and start from default settings."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    config = FSConfig()
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Drop the Rich handlers and level installed by CLI invocations."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def sample_root(tmp_path: Path) -> Path:
    """Create a small tree.

    root/
        a.txt   "alpha"
        b.txt   "bravo"
        c.log   "charlie"
        sub/
            d.txt   "delta"
            deep/
                e.md    "echo"
    """
    root = tmp_path / "root"
    (root / "sub" / "deep").mkdir(parents=True)
    (root / "a.txt").write_text("alpha")
    (root / "b.txt").write_text("bravo")
    (root / "c.log").write_text("charlie")
    (root / "sub" / "d.txt").write_text("delta")
    (root / "sub" / "deep" / "e.md").write_text("echo")
    return root


@pytest.fixture
def sample_dir(sample_root: Path) -> Directory:
    """Directory identity for the sample tree."""
    return Directory(str(sample_root))
