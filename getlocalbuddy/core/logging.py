# File: getlocalbuddy/core/logging.py

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Install a single stream handler on the package logger.

    Safe to call more than once (tests build a fresh app per test).
    """
    logger = logging.getLogger("getlocalbuddy")
    logger.setLevel(level.upper())

    if not any(getattr(h, "_getlocalbuddy", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._getlocalbuddy = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
