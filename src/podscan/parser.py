"""
Builds a Podcast from the raw text of one feed.
"""

import logging
from typing import Optional, Union

from .errors import FeedUnusableError
from .models import Podcast
from .resolvers import resolve_description, resolve_image, resolve_title
from .sanitizer import convert_special_chars
from .segmenter import parse_episodes


def decode_feed_content(content: Union[str, bytes, None]) -> Optional[str]:
    """Decode fetched feed bytes as UTF-8, replacing undecodable bytes."""
    if content is None or isinstance(content, str):
        return content
    return content.decode("utf-8", errors="replace")


class PodcastParser:
    """Turns feed text into Podcast records."""

    def __init__(self) -> None:
        self.logger = logging.getLogger(__name__)

    def parse(self, uri: str, text: str) -> Podcast:
        """Parse one feed.

        Raises:
            FeedUnusableError: if no title can be resolved.
        """
        title = convert_special_chars(resolve_title(text))
        if not title:
            raise FeedUnusableError(f"No title found in feed {uri}")

        image = resolve_image(text)
        if image is None:
            self.logger.debug("No artwork found in feed %s", uri)

        description = convert_special_chars(resolve_description(text))

        podcast = Podcast(
            title=title, link=uri, description=description, image=image
        )
        parse_episodes(podcast, text)
        return podcast

    def from_content(
        self, uri: str, content: Union[str, bytes, None]
    ) -> Optional[Podcast]:
        """Parse fetched content, returning None when the feed is unusable."""
        text = decode_feed_content(content)
        if not text:
            self.logger.info("No content for feed %s, skipping", uri)
            return None

        try:
            podcast = self.parse(uri, text)
        except FeedUnusableError as e:
            self.logger.warning("Feed %s unusable, skipping: %s", uri, e)
            return None
        except Exception as e:  # pylint: disable=broad-except
            self.logger.warning(
                "Feed %s could not be scanned, skipping: %s", uri, e
            )
            return None

        self.logger.info(
            "Parsed '%s' with %d episodes from %s",
            podcast.title,
            len(podcast.episode_map),
            uri,
        )
        return podcast


def parse_feed(uri: str, text: Union[str, bytes, None]) -> Optional[Podcast]:
    """Parse one feed's text into a Podcast, or None if it is unusable."""
    return PodcastParser().from_content(uri, text)
