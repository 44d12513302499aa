"""
Splits feed text into ``<item>`` blocks and turns each one into an Episode.
"""

import logging
from typing import Iterator, List

from .errors import UnparseableLinkError
from .models import Episode, Podcast
from .resolvers import (
    resolve_description,
    resolve_enclosure_link,
    resolve_title,
)
from .sanitizer import convert_special_chars
from .scanner import Cursor, closing_tag_for

ITEM_TAG = "<item>"
ITEM_CLOSE = closing_tag_for(ITEM_TAG)


def iter_item_blocks(text: str) -> Iterator[str]:
    """Yield each ``<item>...</item>`` span in document order.

    Scanning resumes after the previous closer, so nothing inside a consumed
    block is matched again. An item with no closer ends the scan.
    """
    if not text:
        return

    cursor = Cursor(text)
    while cursor.seek(ITEM_TAG):
        block_start = cursor.position
        cursor.advance(len(ITEM_TAG))
        if not cursor.seek(ITEM_CLOSE):
            logging.getLogger(__name__).debug(
                "Unterminated item block at offset %d", block_start
            )
            return
        cursor.advance(len(ITEM_CLOSE))
        yield text[block_start:cursor.position]


def build_episode(block: str, podcast: Podcast, index: int) -> Episode:
    """Build one Episode from an item block."""
    logger = logging.getLogger(__name__)

    title = convert_special_chars(resolve_title(block))
    description = convert_special_chars(resolve_description(block))

    try:
        link = resolve_enclosure_link(block)
    except UnparseableLinkError as e:
        # kept on the episode; resolved_audio_link() reports it
        logger.debug("Episode %d '%s' has no usable link: %s", index, title, e)
        link = None

    return Episode(
        title=title,
        description=description,
        link=link,
        podcast_title=podcast.title,
        sequence_index=index,
    )


def parse_episodes(podcast: Podcast, text: str) -> List[Episode]:
    """Add every item in ``text`` to ``podcast`` and return them in order.

    Indices run 0..N-1 over the discovered blocks. A duplicate title
    overwrites the earlier episode in the podcast's lookup.
    """
    episodes: List[Episode] = []
    for index, block in enumerate(iter_item_blocks(text)):
        episode = build_episode(block, podcast, index)
        podcast.add_episode(episode)
        episodes.append(episode)

    logging.getLogger(__name__).debug(
        "Segmented %d item blocks for '%s'", len(episodes), podcast.title
    )
    return episodes
