"""Application logger shared by every module."""
import logging
import sys

from expression_evaluator.common.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("expression_evaluator")

if not logger.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)


def set_level(level: str) -> None:
    """
    Change the level of the application logger.

    Unknown level names fall back to WARNING.

    :param str level: Level name such as "DEBUG" or "info"
    """
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))


set_level(settings.log_level)
