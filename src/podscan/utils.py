"""
Small helpers shared across the package.
"""

import re

_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]+')


def sanitize_filename(name: str, max_length: int = 150) -> str:
    """Make a title safe to use as a file or directory name."""
    safe = _UNSAFE_FILENAME_CHARS.sub("_", name).strip(" ._")
    return safe[:max_length] or "untitled"
