"""Directory: an FsPath used as a container.

A Directory value does not guarantee that the location exists or is a
directory; operations check for themselves. Listing, search, flattening
and snapshots are built on TreeWalker. Copy, clear and snapshots recurse
through child directories.
"""

import logging
import os
from dataclasses import dataclass

from easyfs.core.config import get_config
from easyfs.errors import (
    ClearError,
    CopyError,
    EasyFSError,
    InvalidArgumentError,
    PathKindError,
    PathNotFoundError,
    from_os_error,
)
from easyfs.filesystem.file import File
from easyfs.filesystem.matcher import PathMatcher
from easyfs.filesystem.models import DirStructure, SearchQuery
from easyfs.filesystem.path import FsPath, PathLike
from easyfs.filesystem.walker import TreeWalker, can_descend, list_entries

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Directory(FsPath):
    """A location whose role is to contain other entries."""

    def create_if_not_exist(self) -> None:
        """Create this directory and any missing ancestors.

        A no-op when the directory already exists.

        Raises:
            PathKindError: If a non-directory occupies the location.
        """
        if self.is_dir():
            return
        if self.exists():
            raise PathKindError(f"Cannot create directory, file exists: {self.path}")
        try:
            os.makedirs(self.path, mode=get_config().dir_mode, exist_ok=True)
        except OSError as e:
            raise from_os_error(e) from e
        logger.debug("Created directory %s", self.path)

    # -------------------------------------------------------------------------
    # Listing
    # -------------------------------------------------------------------------

    def all(self) -> list[FsPath]:
        """Return the immediate children, sorted by name.

        Raises:
            PathNotFoundError: If the directory does not exist.
            FilesystemIOError: If it cannot be listed.
        """
        return list_entries(self.path)

    def files(self) -> list[File]:
        return [entry.as_file() for entry in self.all() if entry.is_file()]

    def dirs(self) -> list["Directory"]:
        return [entry.as_dir() for entry in self.all() if entry.is_dir()]

    def is_empty(self) -> bool:
        """Return True if the directory can be listed and has no children.

        A listing failure counts as not empty.
        """
        try:
            return not self.all()
        except EasyFSError:
            return False

    def has_dir(self, name: str) -> bool:
        return self.join(name).is_dir()

    def has_file(self, name: str) -> bool:
        return self.join(name).is_file()

    def walk(self, recursive: bool = True, max_depth: int | None = None) -> TreeWalker:
        """Return a TreeWalker rooted at this directory."""
        return TreeWalker(
            self.path,
            recursive=recursive,
            max_depth=max_depth,
            follow_symlinks=get_config().follow_symlinks,
        )

    def get_all_path_exists(self) -> list[FsPath]:
        """Flatten the whole subtree in depth-first pre-order.

        Returns an empty list if this directory cannot be listed.
        """
        try:
            return list(self.walk(recursive=True))
        except EasyFSError as e:
            logger.debug("Cannot flatten %s: %s", self.path, e)
            return []

    def get_tree(self) -> DirStructure:
        """Take a snapshot of the directory tree.

        A subtree that cannot be listed appears as an empty snapshot. Use
        all(), files() or dirs() when listing errors must be seen.
        """
        try:
            entries = self.all()
        except EasyFSError as e:
            logger.debug("Cannot list %s for snapshot: %s", self.path, e)
            return DirStructure()

        follow = get_config().follow_symlinks
        dirs: dict[str, DirStructure] = {}
        files: list[File] = []
        for entry in entries:
            if entry.is_dir():
                dirs[entry.name] = (
                    entry.as_dir().get_tree() if can_descend(entry, follow) else DirStructure()
                )
            else:
                files.append(entry.as_file())
        return DirStructure(dirs=dirs, files=tuple(files))

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def search(self, query: SearchQuery) -> list[FsPath]:
        """Run a search described by a SearchQuery."""
        return self._search(query, kind=None)

    def _search(self, query: SearchQuery, kind: str | None) -> list[FsPath]:
        matcher = PathMatcher(query.pattern)
        if query.quantity == 0:
            return []

        results: list[FsPath] = []

        def visit(entry: FsPath) -> bool:
            if not matcher.matches(entry.path):
                return False
            if kind == "file" and not entry.is_file():
                return False
            if kind == "dir" and not entry.is_dir():
                return False
            results.append(entry)
            return len(results) >= query.quantity

        self.walk(recursive=query.recursive).for_each(visit)
        return results

    def find(self, pattern: str, recursive: bool, quantity: int) -> list[FsPath]:
        """Find entries whose full path matches ``pattern``.

        Args:
            pattern: Glob pattern (``*``, ``?``, ``[...]``).
            recursive: Also search subdirectories.
            quantity: Maximum number of results; 0 returns nothing.

        Returns:
            Matches in traversal order. The walk stops as soon as
            ``quantity`` matches were found.

        Raises:
            InvalidPatternError: If the pattern is malformed.
            PathNotFoundError: If this directory does not exist.
        """
        return self._search(SearchQuery(pattern, recursive, quantity), kind=None)

    def find_file(self, pattern: str, recursive: bool, quantity: int) -> list[File]:
        """Like find(), restricted to files; other matches use no quantity."""
        query = SearchQuery(pattern, recursive, quantity)
        return [entry.as_file() for entry in self._search(query, kind="file")]

    def find_dir(self, pattern: str, recursive: bool, quantity: int) -> list["Directory"]:
        """Like find(), restricted to directories; other matches use no quantity."""
        query = SearchQuery(pattern, recursive, quantity)
        return [entry.as_dir() for entry in self._search(query, kind="dir")]

    # -------------------------------------------------------------------------
    # Creation
    # -------------------------------------------------------------------------

    def create_subdir(self, name: str) -> "Directory":
        subdir = self.join(name).as_dir()
        subdir.create_if_not_exist()
        return subdir

    def create_file(self, name: str, overwrite: bool = False) -> File:
        """Create an empty file under this directory.

        An existing file is kept as is unless ``overwrite`` is set.
        """
        file = self.join(name).as_file()
        file.create(overwrite)
        return file

    def create_file_with_data(self, name: str, data: bytes, overwrite: bool = False) -> File:
        """Create a file holding ``data``.

        With ``overwrite=False`` an existing file is left untouched and its
        content is not replaced.
        """
        file = self.join(name).as_file()
        existed = file.exists()
        file.create(overwrite)
        if overwrite or not existed:
            file.write(data)
        return file

    def create_file_with_string(self, name: str, data: str, overwrite: bool = False) -> File:
        file = self.join(name).as_file()
        existed = file.exists()
        file.create(overwrite)
        if overwrite or not existed:
            file.write_string(data)
        return file

    # -------------------------------------------------------------------------
    # Deletion
    # -------------------------------------------------------------------------

    def delete(self, recursive: bool = False) -> None:
        """Delete this directory.

        Args:
            recursive: Remove all contents too. Without it the directory
                must be empty.

        Raises:
            PathKindError: If the location holds a file.
            DirectoryNotEmptyError: If not recursive and children exist.
            PathNotFoundError: If not recursive and nothing exists.
        """
        if self.exists() and not self.is_dir():
            raise PathKindError(f"Not a directory: {self.path}")
        self.delete_path(force=recursive)

    def delete_sub_file(self, name: str) -> None:
        """Delete the file ``name`` inside this directory.

        Raises:
            PathNotFoundError: If no such entry exists.
            PathKindError: If the entry is a directory.
        """
        file = self.join(name).as_file()
        if not file.exists():
            raise PathNotFoundError(f"File not found: {file.path}")
        if file.is_dir():
            raise PathKindError(f"Not a file: {file.path}")
        file.delete()

    def delete_sub_dir(self, name: str, recursive: bool = False) -> None:
        """Delete the subdirectory ``name``.

        Raises:
            PathNotFoundError: If no such entry exists.
            PathKindError: If the entry is not a directory.
        """
        subdir = self.join(name).as_dir()
        if not subdir.exists():
            raise PathNotFoundError(f"Directory not found: {subdir.path}")
        if not subdir.is_dir():
            raise PathKindError(f"Not a directory: {subdir.path}")
        subdir.delete(recursive)

    def clear(self, force: bool = False) -> None:
        """Delete every child while keeping this directory.

        Each child is attempted even if an earlier one failed.

        Args:
            force: Remove non-empty subdirectories recursively.

        Raises:
            ClearError: Listing every child that could not be removed.
        """
        failures: list[tuple[str, Exception]] = []
        for entry in self.all():
            try:
                entry.delete_path(force)
            except EasyFSError as e:
                logger.warning("Could not remove %s: %s", entry, e)
                failures.append((entry.path, e))

        if failures:
            msg = f"Failed to remove {len(failures)} entries from {self.path}"
            raise ClearError(msg, failures)

    # -------------------------------------------------------------------------
    # Copy
    # -------------------------------------------------------------------------

    def copy(self, dest: PathLike) -> "Directory":
        """Copy this directory's contents into ``dest``, keeping the structure.

        ``dest`` is created when missing; each child directory is copied to
        ``dest/<name>`` and each file through File.copy(). A failing child
        does not stop the others.

        Args:
            dest: Directory that becomes a mirror of this one.

        Returns:
            The destination Directory.

        Raises:
            InvalidArgumentError: If dest is this directory or lies inside it.
            PathNotFoundError: If this directory does not exist.
            CopyError: Naming every source path that failed to copy.
        """
        destination = FsPath(dest).as_dir()
        if _inside(destination, self):
            msg = f"Cannot copy {self.path} into itself ({destination.path})"
            raise InvalidArgumentError(msg)

        entries = self.all()
        destination.create_if_not_exist()

        follow = get_config().follow_symlinks
        failures: list[tuple[str, Exception]] = []
        for entry in entries:
            try:
                if entry.is_dir():
                    if not can_descend(entry, follow):
                        logger.warning("Skipping symlinked directory %s", entry)
                        continue
                    entry.as_dir().copy(destination.join(entry.name))
                else:
                    entry.as_file().copy(destination)
            except CopyError as e:
                failures.extend(e.failures)
            except EasyFSError as e:
                logger.warning("Could not copy %s: %s", entry, e)
                failures.append((entry.path, e))

        if failures:
            msg = f"Failed to copy {len(failures)} entries from {self.path}"
            raise CopyError(msg, failures)

        logger.debug("Copied directory %s -> %s", self.path, destination.path)
        return destination


def _inside(destination: FsPath, source: FsPath) -> bool:
    """Return True if destination is source or lies below it, symlinks resolved."""
    if destination.is_same(source) or destination.is_descendant_of(source):
        return True
    real_dest = os.path.realpath(destination.path)
    real_source = os.path.realpath(source.path)
    try:
        return os.path.commonpath([real_dest, real_source]) == real_source
    except ValueError:
        # Different drives on Windows
        return False
