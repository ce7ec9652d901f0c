"""Default logger used when no custom implementation is supplied."""

import logging

from bimprops.config import Config

from .console_logger import ConsoleLogger


class DefaultLogger(ConsoleLogger):
    """ConsoleLogger whose level comes from BIMPROPS_LOG_LEVEL (default INFO)."""

    def __init__(self, name: str = "bimprops"):
        level = getattr(logging, Config.get_log_level(), logging.INFO)
        if not isinstance(level, int):
            level = logging.INFO
        super().__init__(name=name, level=level)
