"""In-memory text storage

Dict-backed store for tests and for embedding the engine where documents
do not live on disk. Paths are plain strings using '/' separators.
"""

import posixpath
from typing import Dict, List, Optional

from bimprops.exceptions import StoreNotFoundError
from bimprops.storage.base import TextStoreBase


class MemoryTextStore(TextStoreBase):
    """Text store that keeps documents in a dictionary"""

    def __init__(self, documents: Optional[Dict[str, str]] = None):
        self.documents: Dict[str, str] = dict(documents or {})
        self.read_count = 0
        self.write_count = 0

    def read_text(self, path: str) -> str:
        self.read_count += 1
        if path not in self.documents:
            raise StoreNotFoundError(path)
        return self.documents[path]

    def write_text(self, path: str, text: str) -> None:
        self.write_count += 1
        self.documents[path] = text

    def exists(self, path: str) -> bool:
        return path in self.documents

    def list_paths(self, directory: str, suffix: str = ".json") -> List[str]:
        directory = directory.rstrip("/")
        return sorted(
            path
            for path in self.documents
            if posixpath.dirname(path) == directory and path.endswith(suffix)
        )
