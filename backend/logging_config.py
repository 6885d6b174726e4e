"""Logging setup — loguru sinks shared by the server and the paste client."""

import sys

from loguru import logger

from config import LOG_LEVEL

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Replace loguru's default handler with a single stderr sink."""
    logger.remove()
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )
