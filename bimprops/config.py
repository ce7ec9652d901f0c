"""Configuration resolved from environment variables.

See bimprops.config_docs for the full list of variables and defaults.
"""

import os
from pathlib import Path
from typing import Optional

from babel import Locale, UnknownLocaleError
from babel.core import default_locale

from bimprops.config_docs import (
    DEFAULT_DATA_DIR,
    DEFAULT_FAMILIES_DIR_NAME,
    DEFAULT_LOCALE,
    DEFAULT_LOG_LEVEL,
    OPTIONS_FILE_NAME,
)


class Config:
    """Accessors for runtime configuration.

    Every accessor reads the environment on each call so tests can
    monkeypatch variables without reloading the module.
    """

    @classmethod
    def get_data_dir(cls) -> Path:
        """Base directory holding family library directories."""
        return Path(os.getenv("BIMPROPS_DATA_DIR", DEFAULT_DATA_DIR))

    @classmethod
    def get_options_file(cls) -> Optional[Path]:
        """Path of the shared family-options.json file.

        BIMPROPS_OPTIONS_FILE wins when set. Otherwise the library
        sub-directories of the data dir are scanned alphabetically and the
        first one containing family-options.json is used. Returns None when
        nothing is found.
        """
        explicit = os.getenv("BIMPROPS_OPTIONS_FILE")
        if explicit:
            return Path(explicit)

        data_dir = cls.get_data_dir()
        if not data_dir.is_dir():
            return None

        for library_dir in sorted(p for p in data_dir.iterdir() if p.is_dir()):
            candidate = library_dir / OPTIONS_FILE_NAME
            if candidate.is_file():
                return candidate
        return None

    @classmethod
    def get_families_dir(cls, options_file: Optional[Path] = None) -> Path:
        """Directory of family manifests, 'Families' next to the options file by default."""
        explicit = os.getenv("BIMPROPS_FAMILIES_DIR")
        if explicit:
            return Path(explicit)

        options_file = options_file or cls.get_options_file()
        if options_file is None:
            return cls.get_data_dir() / DEFAULT_FAMILIES_DIR_NAME
        return options_file.parent / DEFAULT_FAMILIES_DIR_NAME

    @classmethod
    def get_locale(cls) -> str:
        """Locale used after invariant rules when parsing textual numbers."""
        name = os.getenv("BIMPROPS_LOCALE") or default_locale() or DEFAULT_LOCALE
        try:
            return str(Locale.parse(name))
        except (ValueError, TypeError, UnknownLocaleError):
            return DEFAULT_LOCALE

    @classmethod
    def get_log_level(cls) -> str:
        return os.getenv("BIMPROPS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
