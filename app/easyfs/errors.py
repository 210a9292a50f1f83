"""Exception hierarchy for easyfs.

Filesystem failures are raised as subclasses of both ``EasyFSError`` and
the matching built-in ``OSError`` subclass, so callers may catch either
``easyfs.errors.PathNotFoundError`` or plain ``FileNotFoundError``.
"""

from __future__ import annotations

import errno

__all__ = [
    "AlreadyExistsError",
    "BatchOperationError",
    "ClearError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "CopyError",
    "DirectoryNotEmptyError",
    "EasyFSError",
    "FilesystemIOError",
    "InvalidArgumentError",
    "InvalidNameError",
    "InvalidPatternError",
    "PathKindError",
    "PathNotFoundError",
    "PermissionDeniedError",
    "from_os_error",
]


class EasyFSError(Exception):
    """Base exception for all easyfs errors."""


class FilesystemIOError(EasyFSError, OSError):
    """Raised when a read, write, copy or other OS call fails."""


class PathNotFoundError(FilesystemIOError, FileNotFoundError):
    """Raised when a location does not exist."""


class PathKindError(PathNotFoundError):
    """Raised when a location exists but is not the expected kind (file vs directory)."""


class AlreadyExistsError(FilesystemIOError, FileExistsError):
    """Raised when strict creation finds an existing entry."""


class PermissionDeniedError(FilesystemIOError, PermissionError):
    """Raised when the OS refuses access."""


class DirectoryNotEmptyError(FilesystemIOError):
    """Raised when a non-recursive delete targets a non-empty directory."""


class InvalidArgumentError(EasyFSError, ValueError):
    """Raised for malformed arguments."""


class InvalidPatternError(InvalidArgumentError):
    """Raised when a glob pattern cannot be parsed."""


class InvalidNameError(InvalidArgumentError):
    """Raised when an entry name is empty or contains a separator."""


class BatchOperationError(EasyFSError):
    """Raised after a multi-entry operation finished with failures.

    Attributes:
        failures: ``(path, exception)`` pairs, one per failed entry.
    """

    def __init__(self, message: str, failures: list[tuple[str, Exception]]) -> None:
        super().__init__(message)
        self.failures = failures

    @property
    def failed_paths(self) -> list[str]:
        """Paths of the entries that failed, in the order they were attempted."""
        return [path for path, _ in self.failures]


class CopyError(BatchOperationError):
    """Raised when one or more entries could not be copied."""


class ClearError(BatchOperationError):
    """Raised when one or more children could not be removed."""


class ConfigError(EasyFSError):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


_ERRNO_MAP: dict[int, type[FilesystemIOError]] = {
    errno.ENOENT: PathNotFoundError,
    errno.ENOTDIR: PathKindError,
    errno.EISDIR: PathKindError,
    errno.EEXIST: AlreadyExistsError,
    errno.ENOTEMPTY: DirectoryNotEmptyError,
    errno.EACCES: PermissionDeniedError,
    errno.EPERM: PermissionDeniedError,
}


def from_os_error(exc: OSError) -> FilesystemIOError:
    """Translate an ``OSError`` into the matching easyfs exception.

    errno, strerror and both filenames are carried over, so ``str()`` of
    the result reads exactly like the original OS message.

    Args:
        exc: The error raised by the OS call.

    Returns:
        A FilesystemIOError subclass instance (not raised).
    """
    if isinstance(exc, FilesystemIOError):
        return exc

    cls = _ERRNO_MAP.get(exc.errno, FilesystemIOError) if exc.errno is not None else None
    if cls is None:
        if isinstance(exc, FileNotFoundError):
            return PathNotFoundError(str(exc))
        if isinstance(exc, PermissionError):
            return PermissionDeniedError(str(exc))
        return FilesystemIOError(str(exc))

    return cls(exc.errno, exc.strerror, exc.filename, None, exc.filename2)
