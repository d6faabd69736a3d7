"""Process-wide logging setup on the standard logging module."""

import logging
import sys

from rolegate.config import Settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """Install a single stderr handler on the root logger.

    Debug mode forces DEBUG regardless of log_level. Calling this twice
    replaces the handler instead of duplicating output.
    """
    level_name = "DEBUG" if settings.debug else settings.log_level.upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_rolegate", False):
            root.removeHandler(existing)
    handler._rolegate = True
    root.addHandler(handler)
    root.setLevel(level)

    # psycopg_pool logs every connection attempt at INFO.
    logging.getLogger("psycopg.pool").setLevel(max(level, logging.WARNING))
