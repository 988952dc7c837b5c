"""
Logging setup for the API process.
"""

from __future__ import annotations

import logging

from . import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str | None = None) -> None:
    """
    Attach one stream handler to the root logger.

    Safe to call more than once; the handler is created on the first call.
    """
    global _handler
    resolved = logging.getLevelName((level or settings.log_level()).upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    root = logging.getLogger()
    root.setLevel(resolved)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in root.handlers:
        root.addHandler(_handler)
