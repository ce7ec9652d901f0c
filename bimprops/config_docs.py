"""Centralized configuration documentation and defaults for bimprops.

This module provides an overview of all configuration options and their
environment variable mappings.
"""

# =============================================================================
# ENVIRONMENT VARIABLES REFERENCE
# =============================================================================

# Data Locations
# --------------
# BIMPROPS_DATA_DIR: Base directory holding family libraries (default: ./data)
#   Each library is a sub-directory with family-options.json and Families/
#
# BIMPROPS_OPTIONS_FILE: Explicit path to the shared family-options.json
#   When unset, the first library directory (alphabetical) containing
#   family-options.json is used
#
# BIMPROPS_FAMILIES_DIR: Explicit directory of family manifests
#   Default: Families/ next to the options file
#
# Parsing & Logging
# -----------------
# BIMPROPS_LOCALE: Locale tried after invariant rules for textual numbers
#   Default: the system locale detected by Babel, else en_US
#
# BIMPROPS_LOG_LEVEL: Logging verbosity (default: INFO)
#   Values: DEBUG, INFO, WARNING, ERROR, CRITICAL

# =============================================================================
# CONFIGURATION DEFAULTS
# =============================================================================

DEFAULT_DATA_DIR = "./data"
DEFAULT_FAMILIES_DIR_NAME = "Families"
DEFAULT_LOCALE = "en_US"
DEFAULT_LOG_LEVEL = "INFO"

OPTIONS_FILE_NAME = "family-options.json"
MANIFEST_SUFFIX = ".json"

# =============================================================================
# CONFIGURATION HELPER FUNCTIONS
# =============================================================================


def get_config_summary() -> dict:
    """Get a summary of current configuration from environment.

    Returns:
        Dictionary with current configuration values
    """
    from bimprops.config import Config

    options_file = Config.get_options_file()
    return {
        "data_dir": str(Config.get_data_dir()),
        "options_file": str(options_file) if options_file else None,
        "families_dir": str(Config.get_families_dir(options_file)),
        "locale": Config.get_locale(),
        "log_level": Config.get_log_level(),
    }


def validate_configuration() -> tuple[bool, list[str]]:
    """Validate current configuration for completeness and consistency.

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    import logging

    from bimprops.config import Config

    errors = []

    options_file = Config.get_options_file()
    if options_file is None:
        errors.append(
            f"No {OPTIONS_FILE_NAME} found under {Config.get_data_dir()}; "
            "set BIMPROPS_OPTIONS_FILE or BIMPROPS_DATA_DIR"
        )
    elif not options_file.is_file():
        errors.append(f"Options file does not exist: {options_file}")

    families_dir = Config.get_families_dir(options_file)
    if not families_dir.is_dir():
        errors.append(f"Families directory does not exist: {families_dir}")

    if not isinstance(getattr(logging, Config.get_log_level(), None), int):
        errors.append(f"BIMPROPS_LOG_LEVEL='{Config.get_log_level()}' is not a logging level")

    return len(errors) == 0, errors
