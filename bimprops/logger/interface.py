"""Abstract logger interface.

Every component takes a Logger by injection. Messages are short event
descriptions; context travels as keyword arguments so implementations can
render or ship it in a structured form.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Interface implemented by all bimprops loggers."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        pass
