"""Recursive directory traversal.

TreeWalker is the single engine behind searches, flattening and tree
snapshots. Entries are produced depth-first in pre-order: an entry is
visited before its own children, and siblings are visited in name order.
"""

import logging
import os
from collections.abc import Callable, Iterator

from easyfs.errors import EasyFSError, InvalidArgumentError, from_os_error
from easyfs.filesystem.path import FsPath, PathLike

logger = logging.getLogger(__name__)


def list_entries(directory: PathLike) -> list[FsPath]:
    """List the immediate children of a directory, sorted by name.

    Args:
        directory: Directory to list.

    Returns:
        Child identities joined under ``directory``.

    Raises:
        PathNotFoundError: If the directory does not exist.
        PathKindError: If the location is not a directory.
        FilesystemIOError: For any other listing failure.
    """
    base = os.fspath(directory)
    try:
        names = sorted(os.listdir(base))
    except OSError as e:
        raise from_os_error(e) from e
    return [FsPath(os.path.join(base, name)) for name in names]


def links_to_ancestor(entry: FsPath) -> bool:
    """Return True if a symlink resolves to its own directory or one of its ancestors."""
    target = os.path.realpath(entry.path)
    container = os.path.realpath(str(entry.parent))
    try:
        return os.path.commonpath([target, container]) == target
    except ValueError:
        # Different drives on Windows
        return False


def can_descend(entry: FsPath, follow_symlinks: bool = False) -> bool:
    """Decide whether a recursive operation should enter ``entry``.

    Args:
        entry: Candidate child.
        follow_symlinks: Whether symlinked directories may be entered at all.

    Returns:
        True for real directories, and for symlinked directories when
        follow_symlinks is set and the link does not point back up the tree.
    """
    if not entry.is_dir():
        return False
    if not entry.is_symlink():
        return True
    return follow_symlinks and not links_to_ancestor(entry)


class TreeWalker:
    """Depth-first walk over a directory tree.

    Args:
        root: Directory to walk. Its own entry is not yielded.
        recursive: If False, only the immediate children are visited.
        max_depth: Optional bound on depth; 1 means immediate children only.
        follow_symlinks: If True, descend into symlinked directories unless
            the link points back at its own directory or one of its ancestors.
    """

    def __init__(
        self,
        root: PathLike,
        *,
        recursive: bool = True,
        max_depth: int | None = None,
        follow_symlinks: bool = False,
    ) -> None:
        if max_depth is not None and max_depth < 1:
            msg = f"max_depth must be at least 1, got {max_depth}"
            raise InvalidArgumentError(msg)
        self._root = FsPath(root)
        self._recursive = recursive
        self._max_depth = max_depth if recursive else 1
        self._follow_symlinks = follow_symlinks

    def __iter__(self) -> Iterator[FsPath]:
        """Yield every entry under the root.

        Listing the root raises; a listing failure further down is logged
        and that subtree is skipped.
        """
        entries = list_entries(self._root)
        yield from self._walk(entries, depth=1)

    def _walk(self, entries: list[FsPath], depth: int) -> Iterator[FsPath]:
        for entry in entries:
            yield entry
            if not self._should_descend(entry, depth):
                continue
            try:
                children = list_entries(entry)
            except EasyFSError as e:
                logger.warning("Skipping unreadable directory %s: %s", entry, e)
                continue
            yield from self._walk(children, depth + 1)

    def _should_descend(self, entry: FsPath, depth: int) -> bool:
        if self._max_depth is not None and depth >= self._max_depth:
            return False
        return can_descend(entry, self._follow_symlinks)

    def for_each(self, visit: Callable[[FsPath], object]) -> None:
        """Call ``visit`` for every entry until it returns a truthy value.

        Args:
            visit: Callback receiving each entry. Returning True stops the walk
                before any further directory is listed.
        """
        for entry in self:
            if visit(entry):
                return
