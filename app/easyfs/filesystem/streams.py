"""Streaming cursors over a single open file handle.

Each cursor owns exactly one handle, opened when the cursor is built and
released exactly once: on exhaustion, on an I/O error, or on close().
Cursors are context managers, so early abandonment is safe with ``with``::

    with file.chunk_reader(65536) as reader:
        for chunk in reader:
            sink.write(chunk)

Reads and appends are applied strictly in call order.
"""

import logging
from collections.abc import Iterator
from types import TracebackType
from typing import BinaryIO, Self

from easyfs.errors import InvalidArgumentError, from_os_error
from easyfs.filesystem.path import PathLike

logger = logging.getLogger(__name__)


class _FileCursor:
    """Owner of one open file handle."""

    def __init__(self, path: PathLike, mode: str) -> None:
        self.path = str(path)
        try:
            self._handle: BinaryIO | None = open(path, mode)  # noqa: SIM115
        except OSError as e:
            raise from_os_error(e) from e
        logger.debug("Opened %s (%s) for %s", self.path, mode, type(self).__name__)

    @property
    def closed(self) -> bool:
        """True once the handle has been released."""
        return self._handle is None

    def close(self) -> None:
        """Release the handle. Safe to call more than once."""
        handle, self._handle = self._handle, None
        if handle is None:
            return
        try:
            handle.close()
        except OSError as e:
            raise from_os_error(e) from e
        logger.debug("Closed %s", self.path)

    def _fail(self, exc: OSError) -> Exception:
        """Release the handle after an I/O error and return the mapped error."""
        handle, self._handle = self._handle, None
        if handle is not None:
            try:
                handle.close()
            except OSError:
                logger.debug("Close after failure also failed for %s", self.path)
        return from_os_error(exc)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"{type(self).__name__}({self.path!r}, {state})"


class ChunkReader(_FileCursor):
    """Pull-based reader yielding fixed-size chunks of a file.

    Every chunk is ``chunk_size`` bytes long except possibly the last one.
    The handle is closed as soon as the end of the file is seen; after that
    the iterator stays exhausted.

    Args:
        path: File to read.
        chunk_size: Maximum bytes per chunk, at least 1.
    """

    def __init__(self, path: PathLike, chunk_size: int) -> None:
        if chunk_size < 1:
            msg = f"Chunk size must be at least 1, got {chunk_size}"
            raise InvalidArgumentError(msg)
        self.chunk_size = chunk_size
        self.bytes_read = 0
        super().__init__(path, "rb")

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        chunk = self.next_chunk()
        if chunk is None:
            raise StopIteration
        return chunk

    def next_chunk(self) -> bytes | None:
        """Read the next chunk.

        Returns:
            The next chunk, or None once the file is exhausted.

        Raises:
            FilesystemIOError: If the read fails; the handle is released first.
        """
        if self._handle is None:
            return None
        try:
            data = self._handle.read(self.chunk_size)
        except OSError as e:
            raise self._fail(e) from e

        if len(data) < self.chunk_size:
            self.close()
        if not data:
            return None
        self.bytes_read += len(data)
        return data


class LineReader(_FileCursor):
    """Pull-based reader yielding one line per step.

    Lines are returned without their ``\\n`` terminator. A last line with no
    trailing newline is still yielded; the empty remainder after a final
    newline is not.

    Args:
        path: File to read.
        encoding: Codec used to decode each line (undecodable bytes survive
            as surrogate escapes).
    """

    def __init__(self, path: PathLike, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self.line_number = 0
        super().__init__(path, "rb")

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line

    def next_line(self) -> str | None:
        """Read the next line, or return None once the file is exhausted."""
        if self._handle is None:
            return None
        try:
            raw = self._handle.readline()
        except OSError as e:
            raise self._fail(e) from e

        if not raw:
            self.close()
            return None
        if raw.endswith(b"\n"):
            raw = raw[:-1]
        else:
            # No terminator means this was the last line
            self.close()
        self.line_number += 1
        return raw.decode(self.encoding, errors="surrogateescape")


class _AppendCursor(_FileCursor):
    def __init__(self, path: PathLike) -> None:
        self.bytes_written = 0
        super().__init__(path, "ab")

    def _write(self, data: bytes) -> int:
        if self._handle is None:
            msg = f"Cannot append to {self.path}: writer is closed"
            raise InvalidArgumentError(msg)
        try:
            self._handle.write(data)
            self._handle.flush()
        except OSError as e:
            raise self._fail(e) from e
        self.bytes_written += len(data)
        return len(data)


class AppendWriter(_AppendCursor):
    """Push-based writer appending byte chunks to one open handle.

    Args:
        path: File to append to; created when missing.
    """

    def append(self, data: bytes) -> int:
        """Append ``data`` and flush it.

        Returns:
            Number of bytes written.

        Raises:
            InvalidArgumentError: If the writer was already closed.
            FilesystemIOError: If the write fails; the handle is released first.
        """
        return self._write(bytes(data))


class StringAppendWriter(_AppendCursor):
    """Push-based writer appending strings to one open handle.

    Args:
        path: File to append to; created when missing.
        encoding: Codec used to encode each string.
        new_line: If True, every string is prefixed with ``\\n``.
    """

    def __init__(self, path: PathLike, encoding: str = "utf-8", new_line: bool = False) -> None:
        self.encoding = encoding
        self.new_line = new_line
        super().__init__(path)

    def append(self, text: str) -> int:
        """Append ``text`` (optionally newline-prefixed) and flush it.

        Returns:
            Number of bytes written.
        """
        if self.new_line:
            text = "\n" + text
        return self._write(text.encode(self.encoding, errors="surrogateescape"))
