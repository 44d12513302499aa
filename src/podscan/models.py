"""
Data models for podcasts and their episodes.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit

from .errors import InvalidURIError


@dataclass
class Episode:  # pylint: disable=too-many-instance-attributes
    """Represents a single podcast episode.

    The parent podcast is referenced by title only and resolved through the
    library that owns it. ``sequence_index`` is the position of the item in
    its feed and drives ordering, not identity.
    """

    title: Optional[str]
    description: Optional[str]
    link: Optional[str]
    podcast_title: str
    sequence_index: int
    playback_position: Optional[float] = None  # seconds, unset until played

    def resolved_audio_link(self) -> str:
        """Return the audio link, validated as an absolute URI.

        Raises:
            InvalidURIError: if the link is missing or malformed.
        """
        link = self.link
        if not link:
            raise InvalidURIError(f"Episode '{self.title}' has no audio link")

        if any(char.isspace() or ord(char) < 0x20 for char in link):
            raise InvalidURIError(
                f"Episode '{self.title}' has a malformed link: {link!r}"
            )

        try:
            parts = urlsplit(link)
        except ValueError as e:
            raise InvalidURIError(
                f"Episode '{self.title}' has a malformed link: {link!r}"
            ) from e

        if not parts.scheme:
            raise InvalidURIError(
                f"Episode '{self.title}' link is not absolute: {link!r}"
            )
        return link

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Episode":
        """Create Episode from dictionary."""
        return cls(**data)

    def to_json(self) -> Dict[str, Any]:
        """Convert episode to JSON-serializable dictionary."""
        return asdict(self)


@dataclass
class Podcast:
    """Represents a podcast, containing its metadata and episodes.

    Episodes are looked up by title. A later episode with a title already
    present replaces the earlier one.
    """

    title: str
    link: str
    description: Optional[str] = None
    image: Optional[str] = None
    episode_map: Dict[Optional[str], Episode] = field(default_factory=dict)

    def add_episode(self, episode: Episode) -> None:
        """Insert an episode keyed by its title."""
        self.episode_map[episode.title] = episode

    def get_episode(self, title: Optional[str]) -> Optional[Episode]:
        """Get an episode by title, or None."""
        return self.episode_map.get(title)

    def episodes(self) -> List[Episode]:
        """Episodes in feed order."""
        return sorted(
            self.episode_map.values(), key=lambda ep: ep.sequence_index
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Podcast":
        """Create Podcast from dictionary."""
        # Make a copy to avoid modifying the original
        data = data.copy()

        episodes_data = data.pop("episodes", [])
        podcast = cls(**data)
        for ep_data in episodes_data:
            podcast.add_episode(Episode.from_dict(ep_data))
        return podcast

    def to_json(self) -> Dict[str, Any]:
        """Convert podcast to JSON-serializable dictionary."""
        return {
            "title": self.title,
            "link": self.link,
            "description": self.description,
            "image": self.image,
            "episodes": [episode.to_json() for episode in self.episodes()],
        }
