"""Shell-style glob matching for search operations.

Patterns support ``*``, ``?``, ``[...]`` and ``[!...]`` and are matched
case-sensitively against the full path string produced by traversal.
``*`` is not limited to one path segment, so ``*.txt`` matches
``root/sub/a.txt``. Traversal yields full paths such as ``root/a.txt``,
and a search of ``root`` for ``*.txt`` must return that file; a
segment-bound ``*`` could never match it.
"""

import fnmatch
import re

from easyfs.errors import InvalidPatternError


def validate_pattern(pattern: str) -> None:
    """Reject patterns with an unterminated character class.

    Args:
        pattern: Glob pattern to check.

    Raises:
        InvalidPatternError: If the pattern is empty or a ``[`` is never closed.
    """
    if not pattern:
        raise InvalidPatternError("Pattern cannot be empty")

    i, n = 0, len(pattern)
    while i < n:
        if pattern[i] != "[":
            i += 1
            continue
        # Mirror fnmatch: '!' negates, and a ']' right after '[' or '[!' is literal
        j = i + 1
        if j < n and pattern[j] == "!":
            j += 1
        if j < n and pattern[j] == "]":
            j += 1
        while j < n and pattern[j] != "]":
            j += 1
        if j >= n:
            msg = f"Unterminated character class at offset {i} in pattern {pattern!r}"
            raise InvalidPatternError(msg)
        i = j + 1


class PathMatcher:
    """Compiled glob pattern.

    Attributes:
        pattern: The source glob pattern.
    """

    __slots__ = ("_regex", "pattern")

    def __init__(self, pattern: str) -> None:
        validate_pattern(pattern)
        self.pattern = pattern
        self._regex = re.compile(fnmatch.translate(pattern))

    def matches(self, path: str) -> bool:
        """Return True if ``path`` matches the whole pattern."""
        return self._regex.match(path) is not None

    def __repr__(self) -> str:
        return f"PathMatcher({self.pattern!r})"
