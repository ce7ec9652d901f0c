"""Memoizing cache of the shared option groups file."""

import threading
from typing import Dict, List, Optional

from bimprops.exceptions import StoreNotFoundError
from bimprops.logger import Logger, session_logger
from bimprops.mapping.option_mapper import convert_options_document
from bimprops.mapping.records import load_json, option_group_records
from bimprops.models import OptionGroup, SkippedEntry
from bimprops.storage.base import TextStoreBase


class OptionCache:
    """Lazily loads and memoizes the shared option groups, keyed by id.

    The memoized map is shared with every caller and must be treated as
    read-only until invalidate() is called. get() and invalidate() are
    serialized by a lock, so concurrent first callers trigger one store read.
    """

    def __init__(
        self,
        store: TextStoreBase,
        options_path: str,
        logger: Optional[Logger] = None,
        current_locale: Optional[str] = None,
    ):
        """
        Args:
            store: Store holding the shared options file
            options_path: Store path of family-options.json
            logger: Logger instance
            current_locale: Locale tried after invariant rules for textual numbers
        """
        self.store = store
        self.options_path = options_path
        self.logger = logger or session_logger
        self.current_locale = current_locale
        self._lock = threading.Lock()
        self._groups: Optional[Dict[str, OptionGroup]] = None
        self._skipped: List[SkippedEntry] = []
        self.load_count = 0

    @property
    def is_loaded(self) -> bool:
        return self._groups is not None

    @property
    def skipped(self) -> List[SkippedEntry]:
        """Entries dropped during the most recent load."""
        return list(self._skipped)

    def get(self) -> Dict[str, OptionGroup]:
        """Return the option groups, loading them from the store if needed."""
        with self._lock:
            if self._groups is None:
                self._groups = self._load()
            return self._groups

    def invalidate(self) -> None:
        """Drop the memoized groups; the next get() reloads from the store."""
        with self._lock:
            was_loaded = self._groups is not None
            self._groups = None
            self._skipped = []
        self.logger.debug("Option cache invalidated", path=self.options_path, was_loaded=was_loaded)

    def _load(self) -> Dict[str, OptionGroup]:
        self.load_count += 1

        if not self.store.exists(self.options_path):
            self.logger.warning("Shared options file not found", path=self.options_path)
            self._skipped = []
            return {}

        try:
            text = self.store.read_text(self.options_path)
        except StoreNotFoundError:
            self.logger.warning("Shared options file disappeared before read", path=self.options_path)
            self._skipped = []
            return {}

        document = load_json(text, self.options_path)
        records = option_group_records(document, self.options_path)
        result = convert_options_document(records, self.current_locale)

        for entry in result.skipped:
            self.logger.warning(
                "Skipped option entry",
                kind=entry.kind,
                reason=entry.reason,
                option_group_id=entry.option_group_id,
                property_id=entry.property_id,
                index=entry.index,
            )

        self._skipped = result.skipped
        self.logger.info(
            "Option cache loaded",
            path=self.options_path,
            groups=len(result.groups),
            skipped=len(result.skipped),
        )
        return result.groups
