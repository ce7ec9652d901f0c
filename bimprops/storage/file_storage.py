"""File-based text storage implementation

Stores documents as UTF-8 files. Relative paths are resolved against an
optional root directory.
"""

from pathlib import Path
from typing import List, Optional

from bimprops.exceptions import StoreIOError, StoreNotFoundError
from bimprops.logger import Logger, session_logger
from bimprops.storage.base import TextStoreBase


class FileTextStore(TextStoreBase):
    """Text store backed by the local filesystem"""

    ENCODING = "utf-8"

    def __init__(self, root_dir: Optional[str] = None, logger: Optional[Logger] = None):
        """
        Initialize file storage

        Args:
            root_dir: Directory that relative paths are resolved against.
                      If None, relative paths resolve against the working directory.
            logger: Logger instance (defaults to the shared session logger)
        """
        self.root_dir = Path(root_dir) if root_dir is not None else None
        self.logger: Logger = logger or session_logger

    def _resolve(self, path: str) -> Path:
        candidate = Path(path)
        if self.root_dir is not None and not candidate.is_absolute():
            candidate = self.root_dir / candidate
        return candidate

    def read_text(self, path: str) -> str:
        filepath = self._resolve(path)
        if not filepath.is_file():
            self.logger.debug("File not found", path=str(filepath))
            raise StoreNotFoundError(str(filepath))

        try:
            with filepath.open("r", encoding=self.ENCODING) as handle:
                text = handle.read()
        except OSError as e:
            self.logger.error("Failed to read file", path=str(filepath), error=str(e))
            raise StoreIOError("read", str(filepath), str(e)) from e

        self.logger.debug("File read", path=str(filepath), size=len(text))
        return text

    def write_text(self, path: str, text: str) -> None:
        filepath = self._resolve(path)
        try:
            filepath.parent.mkdir(parents=True, exist_ok=True)
            with filepath.open("w", encoding=self.ENCODING, newline="") as handle:
                handle.write(text)
        except OSError as e:
            self.logger.error("Failed to write file", path=str(filepath), error=str(e))
            raise StoreIOError("write", str(filepath), str(e)) from e

        self.logger.debug("File written", path=str(filepath), size=len(text))

    def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def list_paths(self, directory: str, suffix: str = ".json") -> List[str]:
        dirpath = self._resolve(directory)
        if not dirpath.is_dir():
            self.logger.warning("Directory does not exist", directory=str(dirpath))
            return []

        try:
            return sorted(
                str(item)
                for item in dirpath.iterdir()
                if item.is_file() and item.name.endswith(suffix)
            )
        except OSError as e:
            self.logger.error("Failed to list directory", directory=str(dirpath), error=str(e))
            raise StoreIOError("list", str(dirpath), str(e)) from e
