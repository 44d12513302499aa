"""
File access for the podcast library.

Only reads and writes JSON documents under a data directory; what the
documents mean is up to the repository.
"""

import json
import os
from typing import Any, Dict, Optional

from . import config


class Storage:
    """JSON documents rooted at ``base_dir``."""

    def __init__(self, base_dir: str = config.DEFAULT_DATA_DIR):
        self.base_dir = base_dir

    def path_for(self, name: str) -> str:
        return os.path.join(self.base_dir, name)

    def exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def load_document(self, path: str) -> Optional[Dict[str, Any]]:
        """Return the JSON object stored at ``path``.

        A missing file, unreadable JSON, or a top-level value that is not an
        object all read as None.
        """
        if not self.exists(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as handle:
                document = json.load(handle)
        except (json.JSONDecodeError, OSError):
            return None
        if not isinstance(document, dict):
            return None
        return document

    def store_document(self, path: str, document: Dict[str, Any]) -> bool:
        """Replace ``path`` with ``document``; False if it could not be written."""
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)

        staging = f"{path}.tmp"
        try:
            with open(staging, "w", encoding="utf-8") as handle:
                json.dump(document, handle, indent=2, ensure_ascii=False)
            os.replace(staging, path)
        except (OSError, TypeError):
            if os.path.exists(staging):
                os.remove(staging)
            return False
        return True
