import logging
from typing import Any, Dict, Optional, Union

from person_enrichment.domain.ports.services.logger import LoggerPort


class StdLoggerAdapter(LoggerPort):
    """LoggerPort backed by the standard library.

    Context fields are appended to the message as ``key=value`` pairs and also
    passed to handlers through ``extra={"fields": ...}``.
    """

    def __init__(self, name: Optional[str] = None, fields: Optional[Dict[str, Any]] = None):
        self._logger = logging.getLogger(name)
        self._fields = dict(fields or {})

    def bind(self, **fields: Any) -> "StdLoggerAdapter":
        return StdLoggerAdapter(self._logger.name, {**self._fields, **fields})

    def _log(
        self, level: int, msg: str, fields: Dict[str, Any], exc_info: Union[bool, BaseException] = False
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return
        merged = {**self._fields, **fields}
        if merged:
            msg = f"{msg} " + " ".join(f"{key}={value!r}" for key, value in merged.items())
        self._logger.log(level, msg, exc_info=exc_info, extra={"fields": merged})

    def debug(self, msg: str, **fields: Any) -> None:
        self._log(logging.DEBUG, msg, fields)

    def info(self, msg: str, **fields: Any) -> None:
        self._log(logging.INFO, msg, fields)

    def warning(self, msg: str, **fields: Any) -> None:
        self._log(logging.WARNING, msg, fields)

    def error(self, msg: str, **fields: Any) -> None:
        self._log(logging.ERROR, msg, fields)

    def exception(self, msg: str, exc: Optional[BaseException] = None, **fields: Any) -> None:
        self._log(logging.ERROR, msg, fields, exc_info=exc if exc is not None else True)
