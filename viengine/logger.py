"""Engine and client loggers writing to standard output."""

from __future__ import annotations

import logging
import sys

TRACE = 5
"""Level below DEBUG for very chatty engine messages."""

CORE_LOGGER_NAME = "VIEngine"
CLIENT_LOGGER_NAME = "Client"

_FORMAT = "[%(asctime)s] [%(funcName)s:%(lineno)d] [%(name)s] [Thread:%(thread)d] %(message)s"
_DATE_FORMAT = "%H:%M:%S"

logging.addLevelName(TRACE, "TRACE")


class _StdoutHandler(logging.StreamHandler):
    """Stream handler that always writes to the current ``sys.stdout``."""

    @property
    def stream(self):
        return sys.stdout

    @stream.setter
    def stream(self, _value):
        pass


def _configure(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not any(isinstance(handler, _StdoutHandler) for handler in logger.handlers):
        handler = _StdoutHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, _DATE_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(TRACE)
    logger.propagate = False
    return logger


def init_logging() -> None:
    """Set up the engine and client loggers; calling again changes nothing."""
    _configure(CORE_LOGGER_NAME)
    _configure(CLIENT_LOGGER_NAME)


def core_logger() -> logging.Logger:
    """The logger used by the engine itself."""
    return logging.getLogger(CORE_LOGGER_NAME)


def client_logger() -> logging.Logger:
    """The logger used by game code."""
    return logging.getLogger(CLIENT_LOGGER_NAME)