"""
Command-line interface for scanning podcast feeds.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import config
from .downloader import load_rss_from_file
from .factory import create_library, create_library_from_storage
from .manager import LibraryManager


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Parse podcast RSS feeds into a podcast library"
    )
    parser.add_argument("feeds", nargs="*", help="URLs of podcast RSS feeds")
    parser.add_argument(
        "--file",
        action="append",
        default=[],
        dest="files",
        help="Local RSS file to parse (repeatable)",
    )
    parser.add_argument(
        "--episodes",
        type=int,
        default=config.DEFAULT_EPISODE_PREVIEW,
        help="Number of episodes to show per podcast",
    )
    parser.add_argument(
        "--load",
        action="store_true",
        help="Start from the library saved in the data directory",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Save the library to the data directory",
    )
    parser.add_argument(
        "--log-level",
        default=config.DEFAULT_LOG_LEVEL,
        type=str.upper,
        help="Logging level (e.g., DEBUG, INFO)",
    )
    return parser


def _print_library(manager: LibraryManager, episode_count: int) -> None:
    for podcast in manager.get_library():
        print(f"Podcast: {podcast.title}")
        print(f"  Link: {podcast.link}")
        if podcast.image:
            print(f"  Image: {podcast.image}")
        if podcast.description:
            print(f"  Description: {podcast.description}")

        episodes = podcast.episodes()
        print(f"  Episodes: {len(episodes)}")
        for episode in episodes[: max(episode_count, 0)]:
            print(f"    {episode.sequence_index + 1}. {episode.title}")
            print(f"       {episode.link or '(no audio link)'}")


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point for podscan."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        data_dir = config.get_data_dir()

        manager: Optional[LibraryManager] = None
        if args.load:
            manager = create_library_from_storage(data_dir)
            if manager is None:
                print(
                    f"Warning: no saved library in {data_dir}", file=sys.stderr
                )
        if manager is None:
            manager = create_library(data_dir)

        manager.add_podcasts(args.feeds)
        for path in args.files:
            manager.add_feed(path, load_rss_from_file(path))

        if not manager.podcasts:
            print("Error: no podcast could be parsed", file=sys.stderr)
            sys.exit(1)

        _print_library(manager, args.episodes)

        if args.save:
            if not manager.save():
                print("Error: could not save the library", file=sys.stderr)
                sys.exit(1)
            print(f"Saved library to {manager.repository.library_path}")

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
