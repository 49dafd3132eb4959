"""Standard library logging implementation of the LoggingPort."""

from __future__ import annotations

import logging

from mockresponder.adapters.ports import LoggingPort

DEFAULT_LOGGER_NAME = "mockresponder"


class StdlibLoggingAdapter:
    """Routes LoggingPort calls to a stdlib logger.

    Uses the "mockresponder" logger unless one is provided, so pytest's
    caplog and any configured handlers pick up dispatch output.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize the adapter.

        Args:
            logger: Logger to write to. Defaults to logging.getLogger("mockresponder").
        """
        self._logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)

    @property
    def logger(self) -> logging.Logger:
        """Return the wrapped logger."""
        return self._logger

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def error(self, message: str) -> None:
        self._logger.error(message)


# Runtime protocol check
assert isinstance(StdlibLoggingAdapter(), LoggingPort)
