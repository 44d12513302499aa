"""
podscan - Tolerant extraction of podcast metadata from raw RSS feed text.

Feeds are scanned for a fixed tag vocabulary rather than parsed as XML, so
malformed real-world feeds still yield a podcast title, description,
artwork and an ordered list of episodes with their audio links.
"""

from .factory import (
    create_library,
    create_library_from_feeds,
    create_library_from_storage,
)
from .manager import LibraryManager, PlaybackRequest
from .models import Episode, Podcast
from .parser import PodcastParser, parse_feed

__all__ = [
    "create_library",
    "create_library_from_feeds",
    "create_library_from_storage",
    "LibraryManager",
    "PlaybackRequest",
    "Episode",
    "Podcast",
    "PodcastParser",
    "parse_feed",
]
