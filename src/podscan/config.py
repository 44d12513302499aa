"""
Configuration constants for podscan.
"""

import os

# Environment
DATA_DIRECTORY_ENV = "PODSCAN_DATA_DIRECTORY"
DEFAULT_DATA_DIR = "./data"

# Network
REQUEST_TIMEOUT = 30
DOWNLOAD_CHUNK_SIZE = 8192

# Storage
LIBRARY_FILE = "library.json"
AUDIO_SUFFIX = ".mp3"

# CLI
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_EPISODE_PREVIEW = 2


def get_data_dir() -> str:
    """Return the data directory from the environment, or the default."""
    return os.getenv(DATA_DIRECTORY_ENV) or DEFAULT_DATA_DIR
