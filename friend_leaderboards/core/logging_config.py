"""Process-wide logging setup."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Configure the root logger with a single stdout handler."""

    logger = logging.getLogger()
    logger.setLevel(level)

    while logger.hasHandlers():
        logger.removeHandler(logger.handlers[0])

    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname).1s | %(name)-30.30s | %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


__all__ = ["setup_logging"]
