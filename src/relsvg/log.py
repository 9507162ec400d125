"""
Logging setup for the relsvg command line.

The library itself only creates module loggers; handlers are installed
here, and only when a caller asks for them.
"""

from __future__ import annotations

import logging

_LOGGER_CONFIGURED = False


def setup_logging(level: int = logging.INFO) -> None:
    """Attach a console handler to the ``relsvg`` logger (once per process)."""
    global _LOGGER_CONFIGURED

    logger = logging.getLogger("relsvg")
    logger.setLevel(level)
    if _LOGGER_CONFIGURED:
        for handler in logger.handlers:
            handler.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)

    _LOGGER_CONFIGURED = True
