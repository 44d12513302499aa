"""
Tests for item block segmentation and episode construction.
"""

import unittest
from unittest.mock import Mock

from podscan.errors import EpisodeNotFoundError, InvalidURIError
from podscan.manager import LibraryManager
from podscan.segmenter import iter_item_blocks, parse_episodes

from tests.utils import build_item, create_test_podcast


class TestIterItemBlocks(unittest.TestCase):
    """Left-to-right discovery of <item> blocks."""

    def test_blocks_in_order(self) -> None:
        text = "<rss><item>a</item>junk<item>b</item></rss>"
        self.assertEqual(
            list(iter_item_blocks(text)), ["<item>a</item>", "<item>b</item>"]
        )

    def test_empty_text(self) -> None:
        self.assertEqual(list(iter_item_blocks("")), [])

    def test_no_items(self) -> None:
        self.assertEqual(list(iter_item_blocks("<rss></rss>")), [])

    def test_unterminated_item_ends_scan(self) -> None:
        text = "<item>a</item><item>b"
        self.assertEqual(list(iter_item_blocks(text)), ["<item>a</item>"])

    def test_scan_resumes_after_closer(self) -> None:
        """An <item> inside a consumed block is not matched again."""
        text = "<item>a<item>b</item>c</item>"
        self.assertEqual(
            list(iter_item_blocks(text)), ["<item>a<item>b</item>"]
        )


class TestParseEpisodes(unittest.TestCase):
    """Episode records built from item blocks."""

    def setUp(self) -> None:
        """Set up an empty podcast to fill."""
        self.podcast = create_test_podcast()

    def test_sequence_indices(self) -> None:
        text = "".join(
            build_item(title=f"Ep{i}", enclosure=f"http://x/{i}.mp3")
            for i in range(3)
        )
        episodes = parse_episodes(self.podcast, text)

        self.assertEqual([ep.sequence_index for ep in episodes], [0, 1, 2])
        self.assertEqual(
            [ep.title for ep in self.podcast.episodes()], ["Ep0", "Ep1", "Ep2"]
        )
        self.assertEqual(episodes[2].link, "http://x/2.mp3")

    def test_fields_are_sanitized(self) -> None:
        text = build_item(
            title="Q&amp;A",
            description="Tom &amp; Jerry",
            enclosure="http://x/qa.mp3",
        )
        (episode,) = parse_episodes(self.podcast, text)
        self.assertEqual(episode.title, "Q&A")
        self.assertEqual(episode.description, "Tom & Jerry")

    def test_back_reference(self) -> None:
        (episode,) = parse_episodes(
            self.podcast, build_item(title="Ep", link="http://x/a.mp3")
        )
        self.assertEqual(episode.podcast_title, self.podcast.title)
        self.assertIsNone(episode.playback_position)

    def test_duplicate_title_last_write_wins(self) -> None:
        text = build_item(title="Same", enclosure="http://x/a.mp3") + build_item(
            title="Same", enclosure="http://x/b.mp3"
        )
        episodes = parse_episodes(self.podcast, text)

        self.assertEqual(len(episodes), 2)
        self.assertEqual(len(self.podcast.episode_map), 1)
        survivor = self.podcast.get_episode("Same")
        self.assertEqual(survivor.link, "http://x/b.mp3")
        self.assertEqual(survivor.sequence_index, 1)

    def test_missing_link_kept_until_dereferenced(self) -> None:
        text = build_item(title="No audio") + build_item(
            title="Has audio", enclosure="http://x/ok.mp3"
        )
        episodes = parse_episodes(self.podcast, text)

        self.assertEqual(len(episodes), 2)
        self.assertIsNone(episodes[0].link)
        with self.assertRaises(InvalidURIError):
            episodes[0].resolved_audio_link()
        self.assertEqual(episodes[1].resolved_audio_link(), "http://x/ok.mp3")

    def test_untitled_items_share_one_key(self) -> None:
        """Items without a title collapse onto the None key, last one kept."""
        text = build_item(enclosure="http://x/a.mp3") + build_item(
            enclosure="http://x/b.mp3"
        )
        episodes = parse_episodes(self.podcast, text)

        self.assertEqual([ep.title for ep in episodes], [None, None])
        self.assertEqual(list(self.podcast.episode_map), [None])
        self.assertEqual(self.podcast.get_episode(None).link, "http://x/b.mp3")

        manager = LibraryManager(fetcher=Mock())
        manager.podcasts[self.podcast.title] = self.podcast
        with self.assertRaises(EpisodeNotFoundError):
            manager.get_episode(self.podcast.title, None)

    def test_empty_text(self) -> None:
        self.assertEqual(parse_episodes(self.podcast, ""), [])
        self.assertEqual(self.podcast.episodes(), [])


if __name__ == "__main__":
    unittest.main()
