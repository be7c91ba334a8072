"""Logging setup for the diet tracker API."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "diet_tracker"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach the package stream handler once and apply ``level``.

    Repeated calls, one per ``create_app``, only move the level.
    """
    logger = logging.getLogger("diet_tracker")
    logger.setLevel(level.upper())
    if not any(handler.get_name() == _HANDLER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
