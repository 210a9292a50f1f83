"""Path identity: the value type behind every Directory and File.

An FsPath wraps a single location string. It caches nothing, so every
predicate re-queries the OS. Operations that change the referenced
location (``resolve``, ``rename``, ``move``) return a new identity and
leave the receiver untouched; the new identity is only produced after
the OS call succeeded.
"""

from __future__ import annotations

import logging
import os
import shutil
import stat
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from easyfs.errors import (
    InvalidArgumentError,
    InvalidNameError,
    PathNotFoundError,
    from_os_error,
)
from easyfs.filesystem.names import is_valid_dir_name

if TYPE_CHECKING:
    from easyfs.filesystem.directory import Directory
    from easyfs.filesystem.file import File

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


def join(path: PathLike, *names: str) -> FsPath:
    """Join path components into a cleaned FsPath.

    Args:
        path: Base location.
        *names: Components appended in order.

    Returns:
        FsPath for the joined, normalized location.
    """
    return FsPath(os.path.normpath(os.path.join(os.fspath(path), *names)))


@dataclass(frozen=True, slots=True)
class FsPath:
    """A filesystem location that may or may not exist.

    Predicates (``exists``, ``is_dir``, ``is_file``, ``is_symlink``) treat
    any stat failure, permission errors included, as False and never raise.

    Attributes:
        path: Location string using the platform separator.
    """

    path: str

    def __post_init__(self) -> None:
        raw = os.fspath(self.path)
        if not isinstance(raw, str):
            msg = f"Path must be a string, got {type(raw).__name__}"
            raise InvalidArgumentError(msg)
        if not raw:
            raise InvalidArgumentError("Path cannot be empty")
        if os.altsep:
            raw = raw.replace(os.altsep, os.sep)
        object.__setattr__(self, "path", raw)

    def __str__(self) -> str:
        return self.path

    def __fspath__(self) -> str:
        return self.path

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    def exists(self) -> bool:
        """Return True if stat succeeds on this location."""
        try:
            os.stat(self.path)
        except (OSError, ValueError):
            return False
        return True

    def is_dir(self) -> bool:
        """Return True if this location is a directory (following symlinks)."""
        try:
            return stat.S_ISDIR(os.stat(self.path).st_mode)
        except (OSError, ValueError):
            return False

    def is_file(self) -> bool:
        """Return True if this location exists and is not a directory."""
        try:
            return not stat.S_ISDIR(os.stat(self.path).st_mode)
        except (OSError, ValueError):
            return False

    def is_symlink(self) -> bool:
        """Return True if this location itself is a symbolic link."""
        try:
            return stat.S_ISLNK(os.lstat(self.path).st_mode)
        except (OSError, ValueError):
            return False

    def is_abs(self) -> bool:
        return os.path.isabs(self.path)

    def is_rel(self) -> bool:
        return not self.is_abs()

    def is_valid_path(self) -> bool:
        """Check that every component of the path is a portable directory name."""
        parts = [p for p in self.path.split(os.sep) if p]
        if os.name == "nt" and parts and parts[0].endswith(":"):
            parts = parts[1:]
        return all(is_valid_dir_name(p) for p in parts)

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Base name of the location (trailing separators ignored)."""
        cleaned = os.path.normpath(self.path)
        return os.path.basename(cleaned) or cleaned

    @property
    def ext(self) -> str:
        """Extension of the base name including the leading dot, or ''."""
        return os.path.splitext(self.name)[1]

    @property
    def parent(self) -> Directory:
        """Directory containing this location."""
        from easyfs.filesystem.directory import Directory

        return Directory(os.path.dirname(os.path.normpath(self.path)) or os.curdir)

    def join(self, *names: str) -> FsPath:
        """Return a new FsPath for ``names`` under this location."""
        return join(self.path, *names)

    def stat(self) -> os.stat_result:
        """Return the OS stat result for this location.

        Raises:
            PathNotFoundError: If the location does not exist.
            FilesystemIOError: For any other stat failure.
        """
        try:
            return os.stat(self.path)
        except OSError as e:
            raise from_os_error(e) from e

    def abs(self) -> str:
        """Return the absolute form of this path relative to the working directory.

        Raises:
            FilesystemIOError: If the working directory cannot be determined.
        """
        try:
            return os.path.abspath(self.path)
        except OSError as e:
            raise from_os_error(e) from e

    def resolve(self) -> Self:
        """Return a new identity of the same type holding the absolute path.

        The receiver is left unchanged, so two identities built from the same
        relative string stay equal until one of them is rebound.
        """
        return type(self)(self.abs())

    def as_file(self) -> File:
        from easyfs.filesystem.file import File

        return File(self.path)

    def as_dir(self) -> Directory:
        from easyfs.filesystem.directory import Directory

        return Directory(self.path)

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------

    def is_same(self, other: PathLike) -> bool:
        """Return True if both paths have the same absolute form."""
        try:
            return self.abs() == FsPath(other).abs()
        except (OSError, ValueError):
            return False

    def is_sibling_of(self, other: PathLike) -> bool:
        """Return True if both paths share the same parent directory."""
        return self.parent.is_same(FsPath(other).parent)

    def is_descendant_of(self, other: PathLike) -> bool:
        """Return True if this path lies strictly below ``other``."""
        try:
            mine = self.abs()
            theirs = FsPath(other).abs()
        except (OSError, ValueError):
            return False
        if mine == theirs:
            return False
        try:
            return os.path.commonpath([mine, theirs]) == theirs
        except ValueError:
            # Different drives on Windows
            return False

    # -------------------------------------------------------------------------
    # Identity-changing operations
    # -------------------------------------------------------------------------

    def rename(self, new_name: str) -> Self:
        """Rename this entry within its parent directory.

        Args:
            new_name: New base name; must be a single path component.

        Returns:
            A new identity pointing at ``parent/new_name``.

        Raises:
            InvalidNameError: If new_name is empty or contains a separator.
            FilesystemIOError: If the OS rename fails; nothing is changed.
        """
        if not new_name or os.sep in new_name or (os.altsep and os.altsep in new_name):
            msg = f"Invalid name for rename: {new_name!r}"
            raise InvalidNameError(msg)

        destination = os.path.join(str(self.parent), new_name)
        try:
            os.rename(self.path, destination)
        except OSError as e:
            raise from_os_error(e) from e

        logger.debug("Renamed %s -> %s", self.path, destination)
        return type(self)(destination)

    def move(self, new_parent: PathLike) -> Self:
        """Move this entry into another directory, keeping its name.

        Args:
            new_parent: Directory that will contain the entry.

        Returns:
            A new identity pointing at ``new_parent/name``.

        Raises:
            FilesystemIOError: If the OS rename fails; nothing is changed.
        """
        destination = os.path.join(os.fspath(new_parent), self.name)
        try:
            os.rename(self.path, destination)
        except OSError as e:
            raise from_os_error(e) from e

        logger.debug("Moved %s -> %s", self.path, destination)
        return type(self)(destination)

    def set_perm(self, mode: int) -> None:
        """Change the permission bits of this location."""
        try:
            os.chmod(self.path, mode)
        except OSError as e:
            raise from_os_error(e) from e
        logger.debug("Changed mode of %s to %o", self.path, mode)

    def delete_path(self, force: bool = False) -> None:
        """Delete whatever is at this location.

        Args:
            force: If True, remove directories recursively and succeed when
                nothing exists. If False, only a file or an empty directory
                can be removed.

        Raises:
            PathNotFoundError: If force is False and nothing exists.
            DirectoryNotEmptyError: If force is False and the directory has children.
            FilesystemIOError: For any other OS failure.
        """
        try:
            if force:
                # Symlinks (dead or alive) are unlinked, never followed
                if os.path.isdir(self.path) and not os.path.islink(self.path):
                    shutil.rmtree(self.path)
                elif os.path.lexists(self.path):
                    os.remove(self.path)
                else:
                    return
            elif self.is_dir() and not self.is_symlink():
                os.rmdir(self.path)
            elif os.path.lexists(self.path):
                os.remove(self.path)
            else:
                raise PathNotFoundError(f"Path does not exist: {self.path}")
        except PathNotFoundError:
            raise
        except OSError as e:
            raise from_os_error(e) from e

        logger.debug("Deleted %s (force=%s)", self.path, force)
