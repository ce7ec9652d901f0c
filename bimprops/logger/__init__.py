"""
Logger module for bimprops

This module provides a flexible logging interface that allows users to
drop in their own logger implementations.

Usage:
    from bimprops.logger import Logger, DefaultLogger

    # Use the default logger
    logger = DefaultLogger()
    logger.info("Family loaded", family_id="f1")

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            # Your custom implementation
            pass
"""

import logging

from .interface import Logger
from .console_logger import ConsoleLogger
from .default_logger import DefaultLogger

# Shared logger instance for modules that just need basic console logging
session_logger: Logger = ConsoleLogger(level=logging.DEBUG)

__all__ = [
    "Logger",
    "DefaultLogger",
    "ConsoleLogger",
    "session_logger",
]
