"""
Per-field fallback chains over the tag extractor.

Each field lists the triggers used by the feed dialects seen in practice,
most specific first. Supporting a new dialect means adding one candidate.
"""

import logging
from typing import NamedTuple, Optional, Sequence

from .errors import UnparseableLinkError
from .scanner import Cursor, extract_tag


class TagCandidate(NamedTuple):
    """A trigger to try, plus a fixed remnant to drop from its content."""

    trigger: str
    skip: int = 0


TITLE_TAGS = (
    TagCandidate("<title>"),
    TagCandidate("<itunes:summary>"),
)

DESCRIPTION_TAGS = (
    TagCandidate("<itunes:summary>"),
    TagCandidate("<p>"),
    TagCandidate("<description><![CDATA["),
    TagCandidate("<description>"),
)

IMAGE_TAGS = (
    TagCandidate("<image><url>"),
    # open-ended so both <itunes:image href="..."/> and <itunes:image> match
    TagCandidate("<itunes:image"),
    # content reads "url>..." once cleaned; the 4 characters are that remnant
    TagCandidate("<image>", skip=4),
)

ENCLOSURE_TAG = "<enclosure"
URL_ATTRIBUTE = 'url="'
LINK_OPEN = "<link>"
LINK_CLOSE = "</link>"


def try_candidates(
    text: Optional[str], candidates: Sequence[TagCandidate]
) -> Optional[str]:
    """Return the first extraction that succeeds, or None."""
    for candidate in candidates:
        value = extract_tag(text, candidate.trigger)
        if value is None:
            continue
        if candidate.skip:
            if len(value) <= candidate.skip:
                continue
            value = value[candidate.skip:]
        return value
    return None


def resolve_title(text: Optional[str]) -> Optional[str]:
    return try_candidates(text, TITLE_TAGS)


def resolve_description(text: Optional[str]) -> Optional[str]:
    return try_candidates(text, DESCRIPTION_TAGS)


def resolve_image(text: Optional[str]) -> Optional[str]:
    return try_candidates(text, IMAGE_TAGS)


def resolve_enclosure_link(block: str) -> str:
    """Return the audio URL of one item block.

    The ``url`` attribute of an ``<enclosure`` tag wins. Blocks without any
    enclosure fall back to the content of ``<link>...</link>``.

    Raises:
        UnparseableLinkError: if the path taken finds no URL.
    """
    enclosure = block.find(ENCLOSURE_TAG)
    if enclosure == -1:
        return _resolve_link_tag(block)

    cursor = Cursor(block, enclosure)
    if cursor.seek(URL_ATTRIBUTE):
        value_start = cursor.position + len(URL_ATTRIBUTE)
        value_end = block.find('"', value_start)
        if value_end != -1:
            return block[value_start:value_end].strip()

    logging.getLogger(__name__).debug("Enclosure without a url attribute")
    raise UnparseableLinkError("enclosure tag has no url attribute")


def _resolve_link_tag(block: str) -> str:
    cursor = Cursor(block)
    if cursor.seek(LINK_OPEN):
        value_start = cursor.position + len(LINK_OPEN)
        value_end = block.find(LINK_CLOSE, value_start)
        if value_end != -1:
            return block[value_start:value_end].strip()

    raise UnparseableLinkError("item has neither an enclosure nor a link")
