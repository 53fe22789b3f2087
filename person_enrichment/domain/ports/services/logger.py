from abc import ABC, abstractmethod
from typing import Any, Optional


class LoggerPort(ABC):
    """Structured logger handed to each component.

    Keyword arguments are context fields attached to the record, e.g.
    ``logger.warning("Provider failed", provider="agify", reason="timeout")``.
    """

    @abstractmethod
    def bind(self, **fields: Any) -> "LoggerPort":
        pass

    @abstractmethod
    def debug(self, msg: str, **fields: Any) -> None:
        pass

    @abstractmethod
    def info(self, msg: str, **fields: Any) -> None:
        pass

    @abstractmethod
    def warning(self, msg: str, **fields: Any) -> None:
        pass

    @abstractmethod
    def error(self, msg: str, **fields: Any) -> None:
        pass

    @abstractmethod
    def exception(self, msg: str, exc: Optional[BaseException] = None, **fields: Any) -> None:
        """Log at error level with a traceback, taken from ``exc`` when given."""
