"""
Whole-library persistence.

The library is stored verbatim as one JSON document, playback positions
included, so a restored library resumes where the previous run stopped.
"""

import logging
from typing import Dict, Optional

from . import config
from .models import Podcast
from .storage import Storage

SNAPSHOT_VERSION = 1


class LibraryRepository:
    """Saves and restores the podcast library through Storage."""

    def __init__(self, storage: Storage, filename: str = config.LIBRARY_FILE):
        """Initialize with storage instance."""
        self.storage = storage
        self.filename = filename
        self.logger = logging.getLogger(__name__)

    @property
    def library_path(self) -> str:
        return self.storage.path_for(self.filename)

    def library_exists(self) -> bool:
        return self.storage.exists(self.library_path)

    def save_library(self, podcasts: Dict[str, Podcast]) -> bool:
        """Write every podcast and episode to the library file."""
        data = {
            "version": SNAPSHOT_VERSION,
            "podcasts": [
                podcasts[title].to_json() for title in sorted(podcasts)
            ],
        }
        saved = self.storage.store_document(self.library_path, data)
        if saved:
            self.logger.info(
                "Saved %d podcasts to %s", len(podcasts), self.library_path
            )
        else:
            self.logger.error("Could not write library to %s", self.library_path)
        return saved

    def load_library(self) -> Optional[Dict[str, Podcast]]:
        """Read the library file, or None if it is missing or unreadable."""
        data = self.storage.load_document(self.library_path)
        if not data:
            return None

        entries = data.get("podcasts", [])
        if not isinstance(entries, list):
            self.logger.error(
                "Library file %s has no podcast list", self.library_path
            )
            return None

        podcasts: Dict[str, Podcast] = {}
        for podcast_data in entries:
            if not isinstance(podcast_data, dict):
                self.logger.warning(
                    "Skipping malformed podcast entry: %r", podcast_data
                )
                continue
            try:
                podcast = Podcast.from_dict(podcast_data)
            except (KeyError, TypeError) as e:
                self.logger.warning("Skipping malformed podcast entry: %s", e)
                continue
            podcasts[podcast.title] = podcast

        self.logger.info(
            "Loaded %d podcasts from %s", len(podcasts), self.library_path
        )
        return podcasts
