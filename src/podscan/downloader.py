"""
Fetching of feed text and episode audio.

Feed fetches return raw bytes, or None when nothing usable came back, so
callers can treat every failure as "skip this feed".
"""

import logging
import os
from typing import Optional, Tuple

import requests
from tqdm import tqdm

from . import config
from .models import Episode
from .utils import sanitize_filename


# Feeds
def download_rss_from_url(rss_url: str) -> Optional[bytes]:
    """Fetch a feed over HTTP."""
    logger = logging.getLogger(__name__)
    logger.info("Fetching feed %s", rss_url)
    try:
        response = requests.get(rss_url, timeout=config.REQUEST_TIMEOUT)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        logger.error("Could not fetch feed %s: %s", rss_url, e)
        return None

    body = response.content
    if not body:
        logger.error("Feed %s returned an empty body", rss_url)
        return None
    logger.info("Fetched %d bytes from %s", len(body), rss_url)
    return body


def load_rss_from_file(rss_file_path: str) -> Optional[bytes]:
    """Read a feed saved on disk."""
    logger = logging.getLogger(__name__)
    logger.info("Reading feed file %s", rss_file_path)
    try:
        with open(rss_file_path, "rb") as feed_file:
            body = feed_file.read()
    except OSError as e:
        logger.error("Could not read feed file %s: %s", rss_file_path, e)
        return None

    if not body:
        logger.error("Feed file %s is empty", rss_file_path)
        return None
    return body


# Audio
def download_episode_audio(
    episode: Episode, target_dir: str
) -> Tuple[Optional[str], bool]:
    """Save an episode's audio under ``target_dir``, named after its title.

    Raises:
        InvalidURIError: if the episode link cannot be resolved.

    Returns:
        (path, downloaded) where ``downloaded`` is False for a file that
        was already present or a failed transfer (path None).
    """
    audio_url = episode.resolved_audio_link()
    stem = sanitize_filename(
        episode.title or f"episode_{episode.sequence_index}"
    )
    os.makedirs(target_dir, exist_ok=True)
    return download_file_to_path(
        audio_url, os.path.join(target_dir, stem + config.AUDIO_SUFFIX)
    )


def download_file_to_path(
    file_url: str, output_path: str
) -> Tuple[Optional[str], bool]:
    """Stream ``file_url`` into ``output_path`` with a progress bar."""
    logger = logging.getLogger(__name__)
    if os.path.exists(output_path):
        logger.debug("%s already present, not downloading", output_path)
        return output_path, False

    label = os.path.basename(output_path)
    logger.info("Downloading %s <- %s", label, file_url)
    try:
        with requests.get(
            file_url, stream=True, timeout=config.REQUEST_TIMEOUT
        ) as response:
            response.raise_for_status()
            total = int(response.headers.get("content-length", 0))

            with open(output_path, "wb") as audio_file, tqdm(
                total=total, unit="B", unit_scale=True, desc=label, leave=False
            ) as progress:
                for chunk in response.iter_content(
                    chunk_size=config.DOWNLOAD_CHUNK_SIZE
                ):
                    if chunk:  # keep-alive
                        audio_file.write(chunk)
                        progress.update(len(chunk))
    except (requests.exceptions.RequestException, OSError) as e:
        logger.error("Download of %s failed: %s", label, e)
        if os.path.exists(output_path):
            os.remove(output_path)
            logger.debug("Removed partial file %s", output_path)
        return None, False

    logger.info("Saved %s", output_path)
    return output_path, True
