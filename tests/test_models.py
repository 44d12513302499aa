"""
Tests for the Podcast and Episode models.
"""

import unittest

from podscan.errors import InvalidURIError
from podscan.models import Podcast

from tests.utils import create_test_episode, create_test_podcast


class TestEpisode(unittest.TestCase):
    """Audio link resolution and snapshots."""

    def test_resolved_audio_link(self) -> None:
        episode = create_test_episode(link="https://x.com/a.mp3?id=1")
        self.assertEqual(episode.resolved_audio_link(), "https://x.com/a.mp3?id=1")

    def test_missing_link(self) -> None:
        for link in (None, ""):
            with self.subTest(link=link):
                episode = create_test_episode(link=link)
                with self.assertRaises(InvalidURIError):
                    episode.resolved_audio_link()

    def test_malformed_links(self) -> None:
        for link in ("http://x.com/a b.mp3", "relative/path.mp3", "http://[x"):
            with self.subTest(link=link):
                episode = create_test_episode(link=link)
                with self.assertRaises(InvalidURIError):
                    episode.resolved_audio_link()

    def test_invalid_uri_is_value_error(self) -> None:
        episode = create_test_episode(link=None)
        with self.assertRaises(ValueError):
            episode.resolved_audio_link()

    def test_snapshot_keeps_playback_position(self) -> None:
        episode = create_test_episode(playback_position=93.5)
        data = episode.to_json()
        self.assertEqual(data["playback_position"], 93.5)
        self.assertEqual(type(episode).from_dict(data), episode)


class TestPodcast(unittest.TestCase):
    """Episode lookup and ordering."""

    def test_episodes_follow_sequence_index(self) -> None:
        podcast = create_test_podcast(
            episodes=[
                create_test_episode(title="Third", sequence_index=2),
                create_test_episode(title="First", sequence_index=0),
                create_test_episode(title="Second", sequence_index=1),
            ]
        )
        self.assertEqual(
            [ep.title for ep in podcast.episodes()],
            ["First", "Second", "Third"],
        )

    def test_get_episode(self) -> None:
        episode = create_test_episode(title="Found")
        podcast = create_test_podcast(episodes=[episode])
        self.assertIs(podcast.get_episode("Found"), episode)
        self.assertIsNone(podcast.get_episode("Missing"))

    def test_add_episode_overwrites_same_title(self) -> None:
        podcast = create_test_podcast()
        podcast.add_episode(create_test_episode(title="Dup", link="http://x/1"))
        podcast.add_episode(create_test_episode(title="Dup", link="http://x/2"))
        self.assertEqual(len(podcast.episodes()), 1)
        self.assertEqual(podcast.get_episode("Dup").link, "http://x/2")

    def test_snapshot_round_trip(self) -> None:
        podcast = create_test_podcast(
            episodes=[
                create_test_episode(title="B", sequence_index=1),
                create_test_episode(
                    title="A", sequence_index=0, playback_position=12.0
                ),
            ]
        )
        podcast.image = "http://x/art.png"

        data = podcast.to_json()
        self.assertEqual([ep["title"] for ep in data["episodes"]], ["A", "B"])

        restored = Podcast.from_dict(data)
        self.assertEqual(restored, podcast)
        self.assertEqual(restored.get_episode("A").playback_position, 12.0)


if __name__ == "__main__":
    unittest.main()
