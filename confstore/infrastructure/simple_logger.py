"""LoggerPort adapter over the standard logging module."""

import logging
from typing import Any

from ..ports.logger import LoggerPort

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class SimpleLogger(LoggerPort):
    """Writes datastore diagnostics to a named stdlib logger.

    A console handler is attached the first time a name is used, unless the
    application configured one already. Keyword context (``key``, ``error``,
    ``operation`` ...) travels on the record as ``extra`` attributes.
    """

    def __init__(self, name: str = "confstore", level: int = logging.INFO):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self._logger.addHandler(handler)

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(message, extra=kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(message, extra=kwargs)

    def critical(self, message: str, exc_info: BaseException | None = None, **kwargs: Any) -> None:
        """Log a critical event, attaching the exception that caused it."""
        self._logger.critical(message, exc_info=exc_info, extra=kwargs)

    def exception(self, message: str, exc_info: Exception | None = None, **kwargs: Any) -> None:
        """Log at error level with a traceback.

        Without ``exc_info`` the exception currently being handled is used.
        """
        self._logger.exception(message, exc_info=exc_info or True, extra=kwargs)
