"""Console logger backed by the standard logging module."""

import logging
import sys
from typing import Any, Optional

from .interface import Logger


class ConsoleLogger(Logger):
    """Writes log records to stderr with keyword context rendered as key=value pairs."""

    def __init__(
        self,
        name: str = "bimprops",
        level: int = logging.INFO,
        fmt: Optional[str] = None,
    ):
        """
        Args:
            name: Name of the underlying stdlib logger
            level: Minimum level to emit
            fmt: Optional logging.Formatter format string
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                logging.Formatter(fmt or "%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            )
            self._logger.addHandler(handler)
            self._logger.propagate = False

    @property
    def name(self) -> str:
        return self._logger.name

    @staticmethod
    def _format(message: str, kwargs: dict) -> str:
        if not kwargs:
            return message
        context = " ".join(f"{key}={value}" for key, value in kwargs.items())
        return f"{message} | {context}"

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(self._format(message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(self._format(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(self._format(message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(self._format(message, kwargs))

    def critical(self, message: str, **kwargs: Any) -> None:
        self._logger.critical(self._format(message, kwargs))
