"""
Factory functions for creating LibraryManager instances.

This module provides simple factory functions that wire up dependencies
clearly.
"""

import logging
from typing import Iterable, Optional

from . import config
from .manager import Fetcher, LibraryManager
from .repository import LibraryRepository
from .storage import Storage


def create_library(
    data_dir: Optional[str] = None, fetcher: Optional[Fetcher] = None
) -> LibraryManager:
    """Create an empty LibraryManager backed by ``data_dir``."""
    storage = Storage(data_dir or config.get_data_dir())
    repository = LibraryRepository(storage)
    return LibraryManager(repository=repository, fetcher=fetcher)


def create_library_from_feeds(
    uris: Iterable[str],
    data_dir: Optional[str] = None,
    fetcher: Optional[Fetcher] = None,
    save: bool = False,
) -> LibraryManager:
    """Create a LibraryManager by fetching and parsing each feed."""
    logger = logging.getLogger(__name__)
    manager = create_library(data_dir, fetcher)

    uris = list(uris)
    added = manager.add_podcasts(uris)
    logger.info("Added %d of %d feeds to the library", added, len(uris))

    if save and added:
        manager.save()
    return manager


def create_library_from_storage(
    data_dir: Optional[str] = None, fetcher: Optional[Fetcher] = None
) -> Optional[LibraryManager]:
    """Create a LibraryManager from a previously saved library."""
    logger = logging.getLogger(__name__)
    manager = create_library(data_dir, fetcher)
    logger.info(
        "Loading library from storage: %s", manager.repository.library_path
    )

    if not manager.load():
        logger.error(
            "Could not load library from %s", manager.repository.library_path
        )
        return None

    logger.info(
        "Successfully loaded library with %d podcasts",
        len(manager.podcasts),
    )
    return manager
