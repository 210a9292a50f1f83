"""Value types shared by directory operations.

This module defines the tree snapshot returned by Directory.get_tree
and the parameter set of a search.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from easyfs.errors import InvalidArgumentError
from easyfs.filesystem.matcher import validate_pattern

if TYPE_CHECKING:
    from easyfs.filesystem.file import File


@dataclass(frozen=True, slots=True)
class DirStructure:
    """Point-in-time snapshot of a directory tree.

    The snapshot does not track later filesystem changes.

    Attributes:
        dirs: Child directory name to nested snapshot.
        files: Files at this level, in listing order.
    """

    dirs: Mapping[str, DirStructure] = field(default_factory=dict)
    files: tuple[File, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "dirs", MappingProxyType(dict(self.dirs)))
        object.__setattr__(self, "files", tuple(self.files))

    @property
    def file_count(self) -> int:
        """Number of files in this snapshot, subdirectories included."""
        return len(self.files) + sum(d.file_count for d in self.dirs.values())

    @property
    def is_empty(self) -> bool:
        return not self.dirs and not self.files

    def to_dict(self) -> dict[str, object]:
        """Convert to nested dicts and lists of file names, for JSON output."""
        return {
            "dirs": {name: sub.to_dict() for name, sub in self.dirs.items()},
            "files": [f.name for f in self.files],
        }


@dataclass(frozen=True, slots=True)
class SearchQuery:
    """Parameters of a search.

    ``quantity`` is a cutoff, not a guarantee: fewer results are returned
    when the tree holds fewer matches. Zero means no results.

    Attributes:
        pattern: Glob pattern matched against full entry paths.
        recursive: Whether subdirectories are searched.
        quantity: Maximum number of results.
    """

    pattern: str
    recursive: bool = True
    quantity: int = 100

    def __post_init__(self) -> None:
        validate_pattern(self.pattern)
        if self.quantity < 0:
            msg = f"Quantity cannot be negative, got {self.quantity}"
            raise InvalidArgumentError(msg)
