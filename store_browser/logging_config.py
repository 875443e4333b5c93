from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "STORE_BROWSER_LOG_FORMAT"

_FORMATS = {
    "json": "%(asctime)s %(levelname)s %(name)s %(message)s",
    "plain": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
}


def _formatter(mode: str) -> logging.Formatter:
    if mode == "plain":
        return logging.Formatter(_FORMATS["plain"])
    return jsonlogger.JsonFormatter(_FORMATS["json"])


def configure_logging(level: int = logging.INFO, force_format: Optional[str] = None) -> None:
    """
    Route all records through a single stderr handler on the root logger.

    `force_format` wins over $STORE_BROWSER_LOG_FORMAT; either may be "json"
    (the default, one object per line) or "plain". Unknown values fall back to
    json with a warning. Safe to call more than once.
    """
    mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).lower()

    handler = logging.StreamHandler()
    handler.setFormatter(_formatter(mode))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers[:] = [handler]

    if mode not in _FORMATS:
        logging.getLogger(__name__).warning(
            "Unknown log format, using json", extra={"log_format": mode}
        )
