"""
Main orchestration class for the podcast library.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Union

from .downloader import download_rss_from_url
from .errors import (
    EpisodeNotFoundError,
    NoEpisodeSelectedError,
    PodcastNotFoundError,
)
from .models import Episode, Podcast
from .parser import PodcastParser
from .repository import LibraryRepository

Fetcher = Callable[[str], Union[str, bytes, None]]


@dataclass
class PlaybackRequest:
    """What a playback engine needs to start an episode."""

    audio_uri: str
    start_position: Optional[float] = None
    podcast_title: str = ""
    episode_title: Optional[str] = None


class LibraryManager:
    """
    Owns the podcasts keyed by title, feeds new ones through the parser,
    and records playback positions for the selected episode.
    """

    def __init__(
        self,
        repository: Optional[LibraryRepository] = None,
        fetcher: Optional[Fetcher] = None,
        parser: Optional[PodcastParser] = None,
    ):
        """Initialize with optional dependencies."""
        self.logger = logging.getLogger(__name__)
        self.repository = repository
        self.fetcher: Fetcher = fetcher or download_rss_from_url
        self.parser = parser or PodcastParser()
        self.podcasts: Dict[str, Podcast] = {}
        self.current_episode: Optional[Episode] = None

    # Ingestion
    def add_feed(
        self, uri: str, content: Union[str, bytes, None]
    ) -> Optional[Podcast]:
        """Parse already-fetched feed content and store the podcast."""
        podcast = self.parser.from_content(uri, content)
        if podcast is None:
            return None

        if podcast.title in self.podcasts:
            self.logger.info("Replacing podcast '%s'", podcast.title)
        self.podcasts[podcast.title] = podcast
        return podcast

    def add_podcast(self, uri: str) -> Optional[Podcast]:
        """Fetch a feed and store the podcast it describes."""
        content = self.fetcher(uri)
        if not content:
            self.logger.warning(
                "Feed %s did not return content, skipping", uri
            )
            return None
        return self.add_feed(uri, content)

    def add_podcasts(self, uris: Iterable[str]) -> int:
        """Fetch several feeds; returns how many were added."""
        added = 0
        for uri in uris:
            if self.add_podcast(uri) is not None:
                added += 1
        return added

    def remove_podcast(self, title: str) -> Podcast:
        """Evict a podcast and its episodes from the library."""
        podcast = self.get_podcast(title)
        del self.podcasts[title]
        if (
            self.current_episode is not None
            and self.current_episode.podcast_title == title
        ):
            self.current_episode = None
        return podcast

    # Lookup
    def get_library(self) -> List[Podcast]:
        """Podcasts sorted by title."""
        return [self.podcasts[title] for title in sorted(self.podcasts)]

    def get_podcast(self, title: Optional[str]) -> Podcast:
        """Get a podcast by title.

        Raises:
            PodcastNotFoundError: if no podcast has that title.
        """
        podcast = self.podcasts.get(title) if title is not None else None
        if podcast is None:
            raise PodcastNotFoundError(f"Podcast {title} not found")
        return podcast

    def get_episode(
        self, podcast_title: Optional[str], episode_title: Optional[str]
    ) -> Episode:
        """Get an episode by podcast and episode title.

        Raises:
            PodcastNotFoundError: if the podcast is unknown.
            EpisodeNotFoundError: if the podcast has no such episode.
        """
        podcast = self.get_podcast(podcast_title)
        episode = (
            podcast.get_episode(episode_title)
            if episode_title is not None
            else None
        )
        if episode is None:
            raise EpisodeNotFoundError(
                f"Podcast {podcast_title} has no episode {episode_title}"
            )
        return episode

    def parent_of(self, episode: Episode) -> Podcast:
        """Resolve an episode's back reference to its podcast."""
        return self.get_podcast(episode.podcast_title)

    # Playback bookkeeping
    def select_episode(
        self, podcast_title: str, episode_title: str
    ) -> PlaybackRequest:
        """Make an episode current and describe how to start playing it.

        Raises:
            InvalidURIError: if the episode's audio link is unusable.
        """
        episode = self.get_episode(podcast_title, episode_title)
        audio_uri = episode.resolved_audio_link()
        self.current_episode = episode
        self.logger.info(
            "Selected '%s' from '%s' at %s",
            episode.title,
            podcast_title,
            episode.playback_position,
        )
        return PlaybackRequest(
            audio_uri=audio_uri,
            start_position=episode.playback_position,
            podcast_title=podcast_title,
            episode_title=episode.title,
        )

    def save_play_position(self, position: float) -> None:
        """Record the playback position of the current episode.

        Raises:
            NoEpisodeSelectedError: if no episode has been selected.
        """
        if self.current_episode is None:
            raise NoEpisodeSelectedError("No episode is currently selected")
        self.current_episode.playback_position = position

    def change_episode(
        self,
        podcast_title: str,
        episode_title: str,
        current_position: Optional[float] = None,
    ) -> PlaybackRequest:
        """Switch episodes, recording where the outgoing one stopped."""
        if self.current_episode is not None and current_position is not None:
            self.save_play_position(current_position)
        return self.select_episode(podcast_title, episode_title)

    # Persistence
    def save(self) -> bool:
        """Persist the whole library through the repository."""
        if not self.repository:
            raise ValueError("Repository is required to save the library")
        return self.repository.save_library(self.podcasts)

    def load(self) -> bool:
        """Replace the in-memory library with the stored one."""
        if not self.repository:
            raise ValueError("Repository is required to load the library")
        podcasts = self.repository.load_library()
        if podcasts is None:
            return False
        self.podcasts = podcasts
        self.current_episode = None
        return True
