"""Logging setup for geowithin entry points.

The library itself only creates module loggers; scripts call
:func:`configure_logging` once at start-up.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "GEOWITHIN_LOG_LEVEL"
LOG_FORMAT_ENV = "GEOWITHIN_LOG_FORMAT"
DEFAULT_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None, fmt: str | None = None) -> int:
    """Point the root logger at stderr with the requested level and format.

    ``level`` falls back to ``GEOWITHIN_LOG_LEVEL`` and then ``WARNING``;
    unknown level names also resolve to ``WARNING``. ``fmt`` falls back to
    ``GEOWITHIN_LOG_FORMAT``. Existing root handlers are reused so repeated
    calls do not stack output. Returns the numeric level applied.
    """

    level = level or os.getenv(LOG_LEVEL_ENV) or logging.WARNING
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    formatter = logging.Formatter(fmt or os.getenv(LOG_FORMAT_ENV) or DEFAULT_LOG_FORMAT)

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        root_logger.addHandler(logging.StreamHandler())

    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setFormatter(formatter)

    return level


__all__ = ["DEFAULT_LOG_FORMAT", "LOG_FORMAT_ENV", "LOG_LEVEL_ENV", "configure_logging"]
