"""
Fixture builders for podscan tests.
"""

from typing import Iterable, Optional

from podscan.models import Episode, Podcast

SAMPLE_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd">
<channel>
<title>Planet Test</title>
<link>https://example.com/show</link>
<itunes:summary>Stories about &quot;tests&quot; &amp; money.</itunes:summary>
<itunes:image href="https://example.com/art.jpg"/>
<item>
<title>Day of the Debt</title>
<itunes:summary>How debt works.</itunes:summary>
<enclosure url="https://example.com/ep1.mp3" length="1000" type="audio/mpeg"/>
</item>
<item>
<title>Second &#8211; Episode</title>
<description><![CDATA[<p>Show notes with <a href="https://example.com/notes">a link</a> inside</p>]]></description>
<enclosure url="https://example.com/ep2.mp3" length="2000" type="audio/mpeg"/>
</item>
</channel>
</rss>"""


def create_test_episode(**overrides) -> Episode:
    """Create an Episode with test defaults."""
    fields = {
        "title": "Test Episode",
        "description": "A test episode",
        "link": "http://test.com/test.mp3",
        "podcast_title": "Test Podcast",
        "sequence_index": 0,
    }
    fields.update(overrides)
    return Episode(**fields)


def create_test_podcast(
    title: str = "Test Podcast",
    link: str = "http://test.com/rss",
    episodes: Iterable[Episode] = (),
) -> Podcast:
    """Create a Podcast holding the given episodes."""
    podcast = Podcast(title=title, link=link, description="A test podcast")
    for episode in episodes:
        podcast.add_episode(episode)
    return podcast


def build_item(
    title: Optional[str] = None,
    description: Optional[str] = None,
    enclosure: Optional[str] = None,
    link: Optional[str] = None,
) -> str:
    """Build one <item> block from the parts given."""
    parts = ["<item>"]
    if title is not None:
        parts.append(f"<title>{title}</title>")
    if description is not None:
        parts.append(f"<description>{description}</description>")
    if link is not None:
        parts.append(f"<link>{link}</link>")
    if enclosure is not None:
        parts.append(
            f'<enclosure url="{enclosure}" length="1" type="audio/mpeg"/>'
        )
    parts.append("</item>")
    return "".join(parts)


def build_feed(
    title: Optional[str] = "Test Podcast",
    description: Optional[str] = None,
    image: Optional[str] = None,
    items: Iterable[str] = (),
) -> str:
    """Build a minimal RSS document."""
    parts = ["<rss><channel>"]
    if title is not None:
        parts.append(f"<title>{title}</title>")
    if description is not None:
        parts.append(f"<description>{description}</description>")
    if image is not None:
        parts.append(f"<image><url>{image}</url></image>")
    parts.extend(items)
    parts.append("</channel></rss>")
    return "".join(parts)
