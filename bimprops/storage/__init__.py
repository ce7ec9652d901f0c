"""Text storage module

Provides the abstract store interface the core depends on and two
implementations: local files and an in-memory dictionary.
"""

from bimprops.storage.base import TextStoreBase
from bimprops.storage.file_storage import FileTextStore
from bimprops.storage.memory_storage import MemoryTextStore

__all__ = [
    "TextStoreBase",
    "FileTextStore",
    "MemoryTextStore",
]
