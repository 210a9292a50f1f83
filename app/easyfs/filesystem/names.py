"""Entry name validation.

The rules are the portable subset accepted by both POSIX and Windows
filesystems.
"""

import re

_INVALID_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1F]')


def is_valid_file_name(name: str) -> bool:
    """Check whether a file name contains only portable characters.

    Args:
        name: A single path component.

    Returns:
        True if the name is non-empty and free of reserved characters.
    """
    return bool(name) and _INVALID_CHARS.search(name) is None


def is_valid_dir_name(name: str) -> bool:
    """Check whether a directory name is portable.

    Same character rules as files; additionally the name may not end
    with a space or a period, except for ``.`` and ``..``.

    Args:
        name: A single path component.

    Returns:
        True if the name is a valid directory name.
    """
    if name in (".", ".."):
        return True
    if not is_valid_file_name(name):
        return False
    return not name.endswith((" ", "."))
