"""File: an FsPath used as a content holder.

Whole-file reads and writes open and close the file on every call. The
streaming counterparts (chunk_reader, iterate_lines, append_iterative,
append_string_iterative) return cursors that keep one handle open until
they are exhausted or closed.
"""

import logging
import os
import shutil
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime

from easyfs.core.config import get_config
from easyfs.errors import (
    AlreadyExistsError,
    FilesystemIOError,
    InvalidArgumentError,
    PathKindError,
    PathNotFoundError,
    from_os_error,
)
from easyfs.filesystem.path import FsPath, PathLike
from easyfs.filesystem.streams import (
    AppendWriter,
    ChunkReader,
    LineReader,
    StringAppendWriter,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class File(FsPath):
    """A location whose role is to hold content.

    No metadata is cached; size and modification time are re-read on
    every call.
    """

    def _require_file(self) -> None:
        if not self.exists():
            raise PathNotFoundError(f"File not found: {self.path}")
        if self.is_dir():
            raise PathKindError(f"Not a file: {self.path}")

    def _encode(self, text: str) -> bytes:
        return text.encode(get_config().encoding, errors="surrogateescape")

    # -------------------------------------------------------------------------
    # Metadata and lifecycle
    # -------------------------------------------------------------------------

    def size(self) -> int:
        """Return the file size in bytes."""
        return self.stat().st_size

    def mod_time(self) -> datetime:
        """Return the last modification time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.stat().st_mtime, tz=UTC)

    def delete(self) -> None:
        """Remove the file.

        Raises:
            PathNotFoundError: If nothing exists at this location.
            PathKindError: If the location is a directory.
        """
        if self.is_dir() and not self.is_symlink():
            raise PathKindError(f"Not a file: {self.path}")
        try:
            os.remove(self.path)
        except OSError as e:
            raise from_os_error(e) from e
        logger.debug("Deleted file %s", self.path)

    def create(self, overwrite: bool = False, *, strict: bool = False) -> None:
        """Create an empty file.

        An existing file is left untouched unless ``overwrite`` is set, in
        which case it is deleted and recreated empty.

        Args:
            overwrite: Replace an existing file with an empty one.
            strict: Raise instead of silently keeping an existing file.

        Raises:
            AlreadyExistsError: If strict is set and the file exists.
            PathKindError: If a directory occupies the location.
        """
        if self.exists():
            if self.is_dir():
                raise PathKindError(f"Cannot create file, directory exists: {self.path}")
            if strict:
                raise AlreadyExistsError(f"File already exists: {self.path}")
            if not overwrite:
                logger.debug("File %s exists, leaving it untouched", self.path)
                return
            self.delete()

        try:
            with open(self.path, "wb"):
                pass
        except OSError as e:
            raise from_os_error(e) from e
        logger.debug("Created file %s", self.path)

    def create_if_not_exists(self) -> None:
        self.create(False)

    # -------------------------------------------------------------------------
    # Whole-file reads
    # -------------------------------------------------------------------------

    def read(self) -> bytes:
        """Read the whole file.

        Raises:
            PathNotFoundError: If the file does not exist or is a directory.
        """
        self._require_file()
        try:
            with open(self.path, "rb") as f:
                return f.read()
        except OSError as e:
            raise from_os_error(e) from e

    def read_string(self) -> str:
        return self.read().decode(get_config().encoding, errors="surrogateescape")

    def read_lines(self) -> list[str]:
        """Read every line, using the same splitting rules as iterate_lines()."""
        with self.iterate_lines() as lines:
            return list(lines)

    # -------------------------------------------------------------------------
    # Whole-file writes
    # -------------------------------------------------------------------------

    def _write_mode(self, mode: str, data: bytes) -> None:
        try:
            with open(self.path, mode) as f:
                f.write(data)
        except OSError as e:
            raise from_os_error(e) from e

    def write(self, data: bytes) -> None:
        """Replace the file's content with ``data`` (truncate, then write)."""
        self._write_mode("wb", bytes(data))
        logger.debug("Wrote %d bytes to %s", len(data), self.path)

    def write_string(self, data: str) -> None:
        self.write(self._encode(data))

    def write_lines(self, lines: Iterable[str]) -> None:
        """Replace the file's content with ``lines``, each terminated by a newline."""
        self.write_string("".join(f"{line}\n" for line in lines))

    def append(self, data: bytes) -> None:
        """Append ``data`` in a single open/write/close cycle."""
        self._write_mode("ab", bytes(data))
        logger.debug("Appended %d bytes to %s", len(data), self.path)

    def append_string(self, data: str, new_line: bool = False) -> None:
        """Append a string, optionally preceded by a newline separator."""
        if new_line:
            data = "\n" + data
        self.append(self._encode(data))

    def append_lines(self, lines: Iterable[str]) -> None:
        self.append_string("".join(f"{line}\n" for line in lines))

    # -------------------------------------------------------------------------
    # Streaming
    # -------------------------------------------------------------------------

    def chunk_reader(self, chunk_size: int | None = None) -> ChunkReader:
        """Open the file for incremental reading.

        Args:
            chunk_size: Bytes per chunk. Defaults to the configured chunk size.

        Returns:
            An open ChunkReader; use it as a context manager or exhaust it.

        Raises:
            PathNotFoundError: If the file does not exist or is a directory.
            InvalidArgumentError: If chunk_size is below 1.
        """
        if chunk_size is None:
            chunk_size = get_config().chunk_size
        if chunk_size < 1:
            msg = f"Chunk size must be at least 1, got {chunk_size}"
            raise InvalidArgumentError(msg)
        self._require_file()
        return ChunkReader(self.path, chunk_size)

    def iterate_lines(self) -> LineReader:
        """Open the file for line-by-line reading.

        Raises:
            PathNotFoundError: If the file does not exist or is a directory.
        """
        self._require_file()
        return LineReader(self.path, get_config().encoding)

    def append_iterative(self) -> AppendWriter:
        """Open the file once in append mode for repeated byte appends."""
        return AppendWriter(self.path)

    def append_string_iterative(self, new_line: bool = False) -> StringAppendWriter:
        """Open the file once in append mode for repeated string appends.

        Args:
            new_line: Prefix every appended string with a newline.
        """
        return StringAppendWriter(self.path, get_config().encoding, new_line)

    # -------------------------------------------------------------------------
    # Copy
    # -------------------------------------------------------------------------

    def copy(self, dest_dir: PathLike) -> "File":
        """Copy this file into ``dest_dir`` under the same name.

        The destination directory is created when missing. Bytes are
        streamed in configured-size chunks; if writing fails the partial
        copy is removed and the error is raised. A source that cannot be
        opened leaves any existing target as it was.

        Args:
            dest_dir: Directory that receives the copy.

        Returns:
            The newly written File.

        Raises:
            PathNotFoundError: If this file does not exist or is a directory.
            InvalidArgumentError: If the copy would overwrite the source itself.
            FilesystemIOError: If reading or writing fails.
        """
        self._require_file()
        destination = FsPath(dest_dir).as_dir()
        destination.create_if_not_exist()

        target = File(os.path.join(destination.path, self.name))
        if target.is_same(self) or (target.exists() and os.path.samefile(self.path, target.path)):
            msg = f"Cannot copy {self.path} onto itself"
            raise InvalidArgumentError(msg)

        # The target is only removed on failure once this call has truncated it
        with self.chunk_reader() as reader:
            try:
                out = open(target.path, "wb")  # noqa: SIM115
            except OSError as e:
                raise from_os_error(e) from e
            try:
                with out:
                    for chunk in reader:
                        out.write(chunk)
                shutil.copymode(self.path, target.path)
            except FilesystemIOError:
                _discard_partial(target)
                raise
            except OSError as e:
                _discard_partial(target)
                raise from_os_error(e) from e

        logger.debug("Copied %s -> %s", self.path, target.path)
        return target


def _discard_partial(target: File) -> None:
    try:
        if os.path.lexists(target.path):
            os.remove(target.path)
    except OSError as e:
        logger.warning("Could not remove partial copy %s: %s", target.path, e)
