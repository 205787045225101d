import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "DEEPDIG_LOG_LEVEL"
PACKAGE_LOGGER = "deepdig"


def configure_logging(default_level: int = logging.INFO, stream=None) -> logging.Logger:
    """Attach a stream handler to the ``deepdig`` logger and set its level.

    DEEPDIG_LOG_LEVEL overrides ``default_level``. Calling it again replaces the
    handler instead of stacking a second one. The root logger is left alone so
    the host application keeps control of its own output.
    """
    level = _level_from_env(default_level)
    handler = logging.StreamHandler(stream=stream or sys.stderr)
    handler.setFormatter(logging.Formatter("[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for h in list(logger.handlers):
        if not isinstance(h, logging.NullHandler):
            logger.removeHandler(h)
    logger.addHandler(handler)
    return logger


def _level_from_env(default_level: int) -> int:
    level_name: Optional[str] = os.getenv(LOG_LEVEL_ENV)
    if not level_name:
        return default_level
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else default_level
