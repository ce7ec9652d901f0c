"""Base storage interface for text documents

Defines the narrow capability set the core depends on. The core never
touches a filesystem directly, so any backing store can be substituted.
"""

from abc import ABC, abstractmethod
from typing import List


class TextStoreBase(ABC):
    """Abstract base class for text store implementations"""

    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Read the full contents of a document

        Args:
            path: Store path of the document

        Returns:
            Document text

        Raises:
            StoreNotFoundError: If the document does not exist
            StoreIOError: If the read fails
        """
        pass

    @abstractmethod
    def write_text(self, path: str, text: str) -> None:
        """
        Replace the full contents of a document, creating it if needed

        Args:
            path: Store path of the document
            text: New document text

        Raises:
            StoreIOError: If the write fails
        """
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """
        Check if a document exists

        Args:
            path: Store path of the document

        Returns:
            True if the document exists, False otherwise
        """
        pass

    @abstractmethod
    def list_paths(self, directory: str, suffix: str = ".json") -> List[str]:
        """
        List documents directly inside a directory

        Args:
            directory: Store path of the directory
            suffix: Only paths ending with this suffix are returned

        Returns:
            Sorted list of store paths (empty if the directory does not exist)
        """
        pass
