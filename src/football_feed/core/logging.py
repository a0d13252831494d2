from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_PACKAGE_LOGGER = "football_feed"
_HANDLER_NAME = "football_feed.stream"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Safe to call more than once; the level is updated and no duplicate
    handlers are added.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)

    return logger
