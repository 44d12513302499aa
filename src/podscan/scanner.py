"""
Tag-content extraction over raw feed text.

This is not an XML parser. A trigger such as ``<title>`` is located by exact
substring match, and its content runs up to whichever terminator comes
first: a closing-tag start ``</`` or a self-closing end ``/>``.
"""

import logging
from typing import Optional

from .sanitizer import clean_string

CLOSING_TERMINATOR = "</"
SELF_CLOSING_TERMINATOR = "/>"


class Cursor:
    """Bounded read position over a text buffer.

    Every lookahead goes through ``matches`` so comparisons never run past
    the end of the buffer.
    """

    def __init__(self, text: str, position: int = 0):
        self.text = text
        self.position = max(0, min(position, len(text)))

    @property
    def remaining(self) -> int:
        """Number of characters from the position to the end."""
        return len(self.text) - self.position

    def matches(self, literal: str, offset: int = 0) -> bool:
        """Check whether ``literal`` starts at position + offset."""
        start = self.position + offset
        if start < 0 or len(literal) > len(self.text) - start:
            return False
        return self.text.startswith(literal, start)

    def advance(self, count: int = 1) -> None:
        self.position = min(self.position + count, len(self.text))

    def seek(self, literal: str) -> bool:
        """Move to the next occurrence of ``literal``.

        Returns False and leaves the cursor at the end when there is none.
        """
        found = self.text.find(literal, self.position) if literal else -1
        if found == -1:
            self.position = len(self.text)
            return False
        self.position = found
        return True

    def slice_to(self, end: int) -> str:
        """Text between the current position and ``end``."""
        return self.text[self.position:end]


def closing_tag_for(trigger: str) -> str:
    """Derive the closing form of a trigger: ``<title>`` -> ``</title>``."""
    return trigger[:1] + "/" + trigger[1:]


def find_terminator(text: str, start: int) -> Optional[int]:
    """Offset of the first ``</`` or ``/>`` that begins at or after start - 1.

    The window starts one character early so the trigger's last character
    can pair with the first content character.
    """
    cursor = Cursor(text, max(start - 1, 0))
    while cursor.remaining >= 2:
        if cursor.matches(CLOSING_TERMINATOR) or cursor.matches(
            SELF_CLOSING_TERMINATOR
        ):
            return cursor.position
        cursor.advance()
    return None


def extract_raw(text: Optional[str], trigger: str) -> Optional[str]:
    """Return the uncleaned span after the first ``trigger``, or None."""
    if not text or not trigger:
        return None

    cursor = Cursor(text)
    if not cursor.seek(trigger):
        return None

    trigger_offset = cursor.position
    cursor.advance(len(trigger))
    terminator = find_terminator(text, cursor.position)
    if terminator is None:
        logging.getLogger(__name__).debug(
            "Unterminated %s at offset %d", trigger, trigger_offset
        )
        return None

    return cursor.slice_to(terminator)


def extract_tag(text: Optional[str], trigger: str) -> Optional[str]:
    """Return the cleaned content of the first ``trigger`` element, or None."""
    raw = extract_raw(text, trigger)
    if raw is None:
        return None
    return clean_string(raw)
